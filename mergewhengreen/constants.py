"""Identifiers shared with the label-applying surface and repositories."""

# Label a pull request must carry to be merged automatically
MERGE_LABEL = "merge-when-green"

# Per-repository policy file (requiredChecks, requiredStatuses, ...)
CONFIG_FILE_PATH = ".github/merge-when-green.yml"
