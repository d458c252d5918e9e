# AGPL-3.0 License

"""
Runtime settings for the sign-in gate.

Policy constants (size ceiling, allowed files, ...) live in
``signin_gate.checks.policy`` and are deliberately not part of this.
"""

from os.path import abspath, dirname, join

from dynaconf import Dynaconf

current_dir = dirname(abspath(__file__))

global_settings = Dynaconf(
    envvar_prefix="SIGNIN_GATE",
    merge_enabled=True,
    load_dotenv=False,
    settings_files=[join(current_dir, f) for f in [
        "settings/configuration.toml",
    ]],
)


def get_settings():
    """Return the shared settings object."""
    return global_settings
