import sys


def main() -> None:
    """main function, show python version and module version"""
    print(f'Current python version: {sys.version}')
    from importlib.metadata import PackageNotFoundError, version

    try:
        package_ver = version('update-dependencies')
    except PackageNotFoundError:
        package_ver = 'not installed'
    print(f'Installed update-dependencies version: {package_ver}')


if __name__ == '__main__':
    main()
