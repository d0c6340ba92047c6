from errors import ListError
from linkedlist import LinkedList
from typing import Any, Optional
import sys

USAGE = """Usage: demo [count] [--trace]
       demo help  - Show help like this."""


def stringify(value: Any) -> str:
    """Display form of a printed value: nil for None, lowercase booleans and
    integral floats without the trailing .0
    """
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ListDemo:
    """Builds a list of ints by pushing count down to 1 and prints every item
    through foreach. Printed lines are kept in output_log so they can be
    checked after the run, even when nothing is echoed to the console.
    """

    def __init__(self, console_output: bool = True, trace_output: bool = False):
        self.console_output = console_output
        self.trace_output = trace_output
        self.output_log: list[str] = []

    def output(self, value: Any) -> None:
        line = stringify(value)
        self.output_log.append(line)
        if self.console_output:
            print(line)

    def get_output(self) -> list[str]:
        return list(self.output_log)

    def trace(self, message: str) -> None:
        if self.trace_output:
            print(f'[trace] {message}', file=sys.stderr)

    def run(self, count: int = 10) -> LinkedList[int]:
        items: LinkedList[int] = LinkedList(int)
        for i in range(count, 0, -1):
            items.push(i)
            self.trace(f'push {i}')

        self.trace(f'{len(items)} items, head first')
        items.foreach(self.output)
        return items


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    trace_output = '--trace' in args
    args = [arg for arg in args if arg != '--trace']

    if args and args[0] == 'help':
        print(USAGE)
        return 0

    try:
        if len(args) > 1:
            raise ValueError(f'unexpected arguments: {" ".join(args[1:])}')
        count = int(args[0]) if args else 10
        if count < 0:
            raise ValueError(f'count must not be negative, got {count}')
        ListDemo(trace_output=trace_output).run(count)
    except (ValueError, ListError) as err:
        print(f'[error]: {err}', file=sys.stderr)
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
