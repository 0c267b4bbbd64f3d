import argparse
import logging
import sys

import yaml

import update_deps.common.compat_typing as t

try:
    # Run from `python -m update_deps.scripts.show_config`
    from ..config import Config, ConfigurationError
    from ..logger import get_logger, setup_console_logging
except ImportError:
    from update_deps.config import Config, ConfigurationError
    from update_deps.logger import get_logger, setup_console_logging

logger = get_logger('show_config')


def format_yaml(values: t.Dict[str, t.Any]) -> str:
    # safe_dump does not represent tuples
    data = {key: list(value) if isinstance(value, tuple) else value for key, value in values.items()}
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def format_env(values: t.Dict[str, t.Any]) -> str:
    """Output as shell variables, lists are joined back with ';'"""
    env_vars = {setting.attr: setting.env_var for setting in Config.settings()}
    lines = []
    for key, value in values.items():
        if isinstance(value, (list, tuple)):
            value = ';'.join(value)
        lines.append(f'{env_vars[key]}={value}')
    return '\n'.join(lines) + '\n'


def main(argv: t.Optional[t.List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Show update-dependencies settings resolved from the environment')
    parser.add_argument('names', nargs='*', metavar='NAME', help='setting names, default all non-secret settings')
    parser.add_argument('--all', action='store_true', help='include secret settings')
    parser.add_argument('--format', choices=['yaml', 'env'], default='yaml', help='output format')
    parser.add_argument('-v', '--verbose', action='store_true', help='print debug logs')
    args = parser.parse_args(argv)

    if args.verbose:
        setup_console_logging(logging.DEBUG)

    config = Config.instance()
    try:
        values = config.as_dict(args.names or None, include_secrets=args.all)
    except KeyError as e:
        available = ', '.join(setting.attr for setting in Config.settings())
        logger.error(f'{e.args[0]}\nAvailable settings: {available}')
        sys.exit(1)
    except ConfigurationError as e:
        logger.error(e.args[0])
        sys.exit(1)

    if args.format == 'env':
        print(format_env(values), end='')
    else:
        print(format_yaml(values), end='')


if __name__ == '__main__':
    main()
