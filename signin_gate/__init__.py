# AGPL-3.0 License

"""
Pull request gatekeeper for a classroom sign-in repository.

Checks that a pull request only adds one ``students/<date>-<name>/`` folder
holding an ``index.html`` and at most one PNG and one CSS file, each no
larger than 100 KB, and reports the verdict back on the pull request.
"""

__version__ = "0.1.0"
