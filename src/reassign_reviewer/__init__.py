"""reassign-reviewer CLI.

Re-request review on a GitHub pull request from someone who already reviewed
or commented on it. See `reassign-reviewer --help` for details.
"""
