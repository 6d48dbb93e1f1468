from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from pydantic_yaml import parse_yaml_raw_as, to_yaml_str

if TYPE_CHECKING:
    from ..registry import SupportedImplementations

M = TypeVar("M", bound="PolisBaseModel")


def _mod_def_dump_args(kwargs):
    """Set `by_alias=True` and `exclude_none=True` in given kwargs dict, if not set explicitly."""
    if "by_alias" not in kwargs:
        kwargs["by_alias"] = True  # e.g. so we get last_updated instead of last_update
    if "exclude_none" not in kwargs:
        kwargs["exclude_none"] = True  # we treat None as "missing" so leave it out
    return kwargs


def validation_context(
    registry: Optional[SupportedImplementations] = None,
) -> Optional[Dict[str, Any]]:
    """Return pydantic validation context carrying a supported-implementation registry."""
    return None if registry is None else {"registry": registry}


class PolisBaseModel(BaseModel):
    """Extended pydantic BaseModel with some good defaults.

    Used as basis for all POLIS records. JSON keys are the snake_case field
    names (or their alias, where the wire name differs), `None` values are
    omitted on output and JSON is pretty-printed.
    """

    model_config = ConfigDict(
        # keep extra fields by default (records of newer standard revisions)
        extra="allow",
        # when alias is set, still allow using field name
        populate_by_name=True,
        # users should jump through hoops to add invalid stuff
        validate_assignment=True,
        # defaults should also be validated
        validate_default=True,
        # for JSON compat
        allow_inf_nan=False,
        str_strip_whitespace=True,
    )

    def model_dump(self, *args, **kwargs) -> Dict[str, Any]:
        """Return a dict.

        Note that this will eliminate all pydantic models,
        but might still contain complex value types.
        """
        return super().model_dump(*args, **_mod_def_dump_args(kwargs))

    def model_dump_json(self, *args, **kwargs) -> str:
        """Return serialized JSON as string."""
        return super().model_dump_json(*args, **_mod_def_dump_args(kwargs))

    def json_dict(self, **kwargs) -> Dict[str, Any]:
        """Return a JSON-compatible dict."""
        return self.model_dump(mode="json", **kwargs)

    def to_json(self, *, indent: Optional[int] = 2, **kwargs) -> str:
        """Return human-readable (indented) JSON."""
        return self.model_dump_json(indent=indent, **kwargs)

    def to_yaml(self) -> str:
        """Return serialized YAML as string."""
        return to_yaml_str(self)

    @classmethod
    def from_json(
        cls: Type[M],
        data: Union[str, bytes],
        *,
        registry: Optional[SupportedImplementations] = None,
    ) -> M:
        """Decode and validate a JSON document.

        If a registry is passed, it is used instead of the framework
        default wherever implementations are negotiated.
        """
        return cls.model_validate_json(data, context=validation_context(registry))

    @classmethod
    def from_yaml(cls: Type[M], data: str) -> M:
        return parse_yaml_raw_as(cls, data)

    @classmethod
    def from_file(
        cls: Type[M],
        path: Union[str, Path],
        *,
        registry: Optional[SupportedImplementations] = None,
    ) -> M:
        """Decode and validate a JSON file."""
        return cls.from_json(Path(path).read_bytes(), registry=registry)

    def __bytes__(self) -> bytes:
        """Serialize to JSON and return UTF-8 encoded bytes to be written in a file."""
        # add a newline, as otherwise behaviour with text editors will be confusing
        # (e.g. vim automatically adds a trailing newline that it hides)
        return (self.to_json() + "\n").encode(encoding="utf-8")

    def __str__(self) -> str:
        return self.to_json()
