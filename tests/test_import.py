import inspect


def test_import_from_package() -> None:
    # exported methods / classes
    from update_deps import Config, ConfigurationError, get_config
    from update_deps.config import EnvSetting, split_list
    from update_deps.logger import MultiLineFormatter, get_logger, setup_console_logging
    from update_deps.scripts.show_config import main

    assert all(callable(fn) for fn in [get_config, split_list, get_logger, setup_console_logging, main])
    assert all(inspect.isclass(cls) for cls in [Config, ConfigurationError, EnvSetting, MultiLineFormatter])
    assert issubclass(ConfigurationError, ValueError)


def test_main_prints_version(capsys) -> None:  # type: ignore
    from update_deps.__main__ import main

    main()
    out = capsys.readouterr().out
    assert 'Current python version' in out
    assert 'update-dependencies version' in out
