# AGPL-3.0 License

"""
Fixed contribution policy. Not configurable at runtime.
"""

CONTRIBUTION_ROOT = "students"
REQUIRED_FILENAME = "index.html"
PATH_DEPTH = 3

MAX_FILE_SIZE_BYTES = 100 * 1024
MAX_FILE_SIZE_LABEL = "100 KB"

# extension -> maximum number of files allowed in the folder
OPTIONAL_EXTENSIONS = {
    "png": 1,
    "css": 1,
}
