"""Console prompts with retry on unparsable input."""

from typing import Callable

from ..domain.core.value_objects.gender import Gender

InputFn = Callable[[], str]
OutputFn = Callable[[str], None]


class Prompter:
    """Read typed values from the console.

    ``input_fn`` and ``output_fn`` default to stdin/stdout and are
    injectable for tests. EOFError from ``input_fn`` propagates.
    """

    def __init__(self, input_fn: InputFn = input, output_fn: OutputFn = print):
        self._input = input_fn
        self._output = output_fn

    def say(self, message: str) -> None:
        self._output(message)

    def read_line(self, prompt: str) -> str:
        self._output(prompt)
        return self._input().strip()

    def read_float(self, prompt: str) -> float:
        """Read a float, retrying until the input parses."""
        self._output(prompt)
        while True:
            raw = self._input().strip()
            try:
                return float(raw)
            except ValueError:
                self._output("Invalid number. Please enter a valid floating point number:")

    def read_age(self, prompt: str) -> int:
        """Read a non-negative whole number of years, retrying on bad input."""
        self._output(prompt)
        while True:
            raw = self._input().strip()
            try:
                age = int(raw)
            except ValueError:
                age = -1
            if age >= 0:
                return age
            self._output("Invalid age. Please enter a whole number of years:")

    def read_gender(self, prompt: str) -> Gender:
        """Read gender.

        Raises:
            InvalidGenderError: If input is not 'm' or 'f'
        """
        return Gender.from_input(self.read_line(prompt))
