import os
import threading

import update_deps.common.compat_typing as t

from .setting import EnvSetting, split_list

ROSLYN_VERSION_URL = 'https://raw.githubusercontent.com/dotnet/versions/master/build-info/dotnet/roslyn/netcore1.0'
CORESETUP_VERSION_URL = 'https://raw.githubusercontent.com/dotnet/versions/master/build-info/dotnet/core-setup/master'


class Config:
    """Settings of the update-dependencies script, read from environment variables.

    Required:
        - GITHUB_USER: The user to commit the changes as.
        - GITHUB_EMAIL: The user's email to commit the changes as.
        - GITHUB_PASSWORD: The password/personal access token of the GitHub user.

    Optional:
        - ROSLYN_VERSION_URL: The url to get the current Roslyn version.
        - CORESETUP_VERSION_URL: The url to get the current dotnet/core-setup package versions.
        - GITHUB_ORIGIN_OWNER: The owner of the fork to push the commit and create the PR from.
          Defaults to GITHUB_USER.
        - GITHUB_UPSTREAM_OWNER: The owner of the base repo to create the PR to. (dotnet)
        - GITHUB_PROJECT: The repo name under the origin and upstream owners. (cli)
        - GITHUB_UPSTREAM_BRANCH: The branch in the base repo to create the PR to. (master)
        - GITHUB_PULL_REQUEST_NOTIFICATIONS: A ';' separated list of GitHub users to notify on the PR.

    Nothing is read when the object is created. Each setting is looked up on first access
    and cached, later changes of the environment are not seen by the same instance.

    Example usage:

        ```python
        config = Config.instance()
        print(config.github_upstream_owner, config.github_project)
        ```
    """

    _instance: t.ClassVar[t.Optional['Config']] = None
    _instance_lock: t.ClassVar[threading.Lock] = threading.Lock()

    user_name = EnvSetting('GITHUB_USER')
    email = EnvSetting('GITHUB_EMAIL')
    password = EnvSetting('GITHUB_PASSWORD', secret=True)

    roslyn_version_url = EnvSetting('ROSLYN_VERSION_URL', ROSLYN_VERSION_URL)
    core_setup_version_url = EnvSetting('CORESETUP_VERSION_URL', CORESETUP_VERSION_URL)
    github_origin_owner = EnvSetting('GITHUB_ORIGIN_OWNER', fallback='user_name')
    github_upstream_owner = EnvSetting('GITHUB_UPSTREAM_OWNER', 'dotnet')
    github_project = EnvSetting('GITHUB_PROJECT', 'cli')
    github_upstream_branch = EnvSetting('GITHUB_UPSTREAM_BRANCH', 'master')
    github_pull_request_notifications = EnvSetting('GITHUB_PULL_REQUEST_NOTIFICATIONS', '', convert=split_list)

    def __init__(self, environ: t.Optional[t.Mapping[str, str]] = None) -> None:
        # os.environ is kept by reference, variables are read when a setting is first accessed
        self.environ: t.Mapping[str, str] = os.environ if environ is None else environ
        self._values: t.Dict[str, t.Any] = {}
        self._locks = {setting.attr: threading.Lock() for setting in self.settings()}

    @classmethod
    def instance(cls) -> 'Config':
        """The shared instance of the process, created on first call."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def _reset(cls) -> None:
        """Drop the shared instance to accept new environment variables. Mainly used in unit tests."""
        with cls._instance_lock:
            cls._instance = None

    @classmethod
    def settings(cls) -> t.List[EnvSetting]:
        """All declared settings, in declaration order."""
        found: t.Dict[str, EnvSetting] = {}
        for klass in reversed(cls.__mro__):
            for attr, value in vars(klass).items():
                if isinstance(value, EnvSetting):
                    found[attr] = value
        return list(found.values())

    def is_resolved(self, attr: str) -> bool:
        return attr in self._values

    def as_dict(self, names: t.Optional[t.Sequence[str]] = None, include_secrets: bool = False) -> t.Dict[str, t.Any]:
        """Resolve settings and return them by attribute name

        Args:
            names (Sequence[str], optional): attributes to resolve, default all settings.
            include_secrets (bool, optional): also return secret settings when names is not given.

        Raises:
            KeyError: unknown attribute name.
            ConfigurationError: a required setting is not set.

        Returns:
            Dict[str, Any]: setting values
        """
        settings = {setting.attr: setting for setting in self.settings()}
        if names:
            unknown = [name for name in names if name not in settings]
            if unknown:
                raise KeyError(f'Unknown setting: {", ".join(unknown)}')
            selected = [settings[name] for name in names]
        else:
            selected = [setting for setting in settings.values() if include_secrets or not setting.secret]
        return {setting.attr: getattr(self, setting.attr) for setting in selected}


def get_config() -> Config:
    """Shortcut of Config.instance()"""
    return Config.instance()
