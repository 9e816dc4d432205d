import re
from typing import Any

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict

_ARGS_BLOCK = re.compile(
    r'\n\s*Args:\s*\n(.*?)(?:\n\s*\n|\n\s*[A-Z][a-z]+:|\Z)',
    re.DOTALL,
)
_ARG_LINE = re.compile(r'^\s*(\w+):\s*(.*)$')


def parse_docstring_args(docstring: str | None) -> dict[str, str]:
    """Collect `name: description` pairs from a docstring Args block.

    Continuation lines are folded into the description of the
    preceding argument.
    """
    if not docstring:
        return {}

    match = _ARGS_BLOCK.search(docstring)
    if not match:
        return {}

    described: dict[str, list[str]] = {}
    current: list[str] | None = None

    for line in match.group(1).split('\n'):
        arg_match = _ARG_LINE.match(line)
        if arg_match:
            current = described.setdefault(arg_match.group(1), [])
            if arg_match.group(2).strip():
                current.append(arg_match.group(2).strip())
        elif current is not None and line.strip():
            current.append(line.strip())

    return {
        name: ' '.join(parts)
        for name, parts in described.items()
        if parts
    }


class BaseModel(PydanticBaseModel):
    """Frozen record model for parsed systemctl output.

    Field descriptions are filled from the `Args:` block of the
    subclass docstring when the subclass is defined.
    """
    model_config = ConfigDict(frozen=True)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        descriptions = parse_docstring_args(cls.__doc__)
        for name, field_info in cls.model_fields.items():
            if field_info.description is None and name in descriptions:
                field_info.description = descriptions[name]
