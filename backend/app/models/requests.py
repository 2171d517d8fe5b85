"""Validation of the untyped query bag into a fully-populated icon request."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.errors import InvalidRequestError
from app.models.options import DecorationOptions, LayoutOptions

# Letters, digits, '-' and '_' only; never '.', '/' or '\'.
SAFE_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9_-]{0,63}")

ICON_LIST_PARAM = "i"


class IconRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    names: list[str] = Field(..., min_length=1, description="Icon identifiers, in display order")
    layout: LayoutOptions = Field(default_factory=LayoutOptions)
    decoration: DecorationOptions = Field(default_factory=DecorationOptions)

    @field_validator("names")
    @classmethod
    def _safe_names(cls, names: list[str]) -> list[str]:
        for name in names:
            if not SAFE_NAME_RE.fullmatch(name):
                raise ValueError(
                    f"invalid icon name {name!r} (allowed: letters, digits, '-', '_'; max 64 chars)"
                )
        return names


def split_names(raw: str) -> list[str]:
    """Split a comma-separated icon list, trimming blanks."""
    return [name.strip() for name in raw.split(",") if name.strip()]


def parse_icon_request(params: Mapping[str, Any], max_icons: int) -> IconRequest:
    """Turn raw query parameters into an IconRequest or raise InvalidRequestError."""
    raw_names = params.get(ICON_LIST_PARAM)
    if raw_names is None or not str(raw_names).strip():
        raise InvalidRequestError("Missing ?i=... parameter (example: ?i=rust,python)")

    names = split_names(str(raw_names))
    if not names:
        raise InvalidRequestError("Icon list is empty")
    if len(names) > max_icons:
        raise InvalidRequestError(f"Too many icons: {len(names)} requested, at most {max_icons} allowed")

    options = {k: v for k, v in params.items() if k != ICON_LIST_PARAM}
    unknown = sorted(set(options) - option_keys())
    if unknown:
        raise InvalidRequestError(f"Unknown option(s): {', '.join(unknown)}")

    try:
        return IconRequest(
            names=names,
            layout=LayoutOptions.model_validate(options),
            decoration=DecorationOptions.model_validate(options),
        )
    except ValidationError as e:
        raise InvalidRequestError(_describe(e)) from e


def option_keys() -> set[str]:
    """Every accepted query key: option field names plus their aliases."""
    keys: set[str] = set()
    for model in (LayoutOptions, DecorationOptions):
        for name, info in model.model_fields.items():
            keys.add(name)
            if isinstance(info.validation_alias, AliasChoices):
                keys.update(c for c in info.validation_alias.choices if isinstance(c, str))
            elif isinstance(info.validation_alias, str):
                keys.add(info.validation_alias)
    return keys


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "Invalid request: " + "; ".join(parts)
