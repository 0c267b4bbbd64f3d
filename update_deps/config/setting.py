import update_deps.common.compat_typing as t

from ..logger import get_logger

logger = get_logger('config')

T = t.TypeVar('T')


class ConfigurationError(ValueError):
    """A required environment variable is not set and has no default."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Can't find environment variable '{name}'.")
        self.name = name


def split_list(raw: str, separator: str = ';') -> t.Tuple[str, ...]:
    """Split a separated list and drop empty segments, eg: 'a;;b;' -> ('a', 'b')"""
    return tuple(item for item in raw.split(separator) if item)


class EnvSetting(t.Generic[T]):
    """A read-only setting resolved from one environment variable on first access.

    The owner instance must provide ``environ`` (a mapping), ``_values`` (the cache dict)
    and ``_locks`` (one lock per setting attribute), see ``Config``.

    Args:
        env_var (str): environment variable name, case-sensitive.
        default (str, optional): used if the variable is not set. None means required.
        fallback (str, optional): attribute of another string setting used if the variable is not set.
        convert (Callable, optional): applied to the raw string before it is cached.
        secret (bool, optional): omitted from ``Config.as_dict()`` unless asked for explicitly.
    """

    def __init__(
        self,
        env_var: str,
        default: t.Optional[str] = None,
        fallback: t.Optional[str] = None,
        convert: t.Optional[t.Callable[[str], T]] = None,
        secret: bool = False,
    ) -> None:
        self.env_var = env_var
        self.default = default
        self.fallback = fallback
        self.convert = convert
        self.secret = secret
        self.attr = env_var.lower()

    def __set_name__(self, owner: t.Type[t.Any], name: str) -> None:
        self.attr = name

    def __repr__(self) -> str:
        return f'EnvSetting({self.attr}={self.env_var})'

    @property
    def required(self) -> bool:
        return self.default is None and self.fallback is None

    @t.overload
    def __get__(self, instance: None, owner: t.Type[t.Any]) -> 'EnvSetting[T]': ...

    @t.overload
    def __get__(self, instance: t.Any, owner: t.Type[t.Any]) -> T: ...

    def __get__(self, instance: t.Any, owner: t.Optional[t.Type[t.Any]] = None) -> t.Any:
        if instance is None:
            return self
        return self.resolve(instance)

    def __set__(self, instance: t.Any, value: t.Any) -> None:
        raise AttributeError(f'Setting {self.attr} is read-only, set {self.env_var} in the environment instead')

    def resolve(self, instance: t.Any) -> T:
        """Return the cached value, resolving it at most once per instance."""
        values = instance._values  # pylint: disable=protected-access
        if self.attr in values:
            return t.cast(T, values[self.attr])
        with instance._locks[self.attr]:  # pylint: disable=protected-access
            # Another thread may have finished while we waited for the lock
            if self.attr not in values:
                values[self.attr] = self._compute(instance)
        return t.cast(T, values[self.attr])

    def _compute(self, instance: t.Any) -> t.Any:
        raw = instance.environ.get(self.env_var)
        if raw is not None:
            logger.debug(f'Got {self.env_var} from environment')
        elif self.default is not None:
            raw = self.default
            logger.debug(f'{self.env_var} not set, using default')
        elif self.fallback:
            logger.debug(f'{self.env_var} not set, falling back to {self.fallback}')
            # fallback values are already converted by their own setting
            return getattr(instance, self.fallback)
        else:
            logger.warning(f"Can't find environment variable '{self.env_var}'.")
            raise ConfigurationError(self.env_var)
        if self.convert is not None:
            return self.convert(raw)
        return raw
