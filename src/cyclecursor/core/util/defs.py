from typing import Final

# META
PACKAGE_NAME: Final[str] = __name__.split('.')[0]

# MESSAGES
STALE_POSITION_HINT: Final[str] = 'The backing list was modified; call cycle_next, cycle_prev or seek to re-enter it.'


if __name__ == '__main__':
    def main() -> None:
        globs = globals().copy()
        for name, value in globs.items():
            if not name.startswith('__') and name.isupper():
                print(f'{name}: {value}')
    main()
