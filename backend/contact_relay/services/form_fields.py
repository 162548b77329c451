"""
Raw multipart form values.

Starlette's ``FormData`` is a multi-dict: a field that appears once has one
value, a repeated field has several. Instead of duck-typing on that shape
later on, text fields are converted into a small tagged union here:

  ScalarField(value)     — the field appeared once
  ListField(values)      — the field appeared more than once

``first_value`` is the only way the rest of the code reads a field.

File parts are kept as Starlette ``UploadFile`` objects: a single upload
stays a bare ``UploadFile``, repeated uploads under one name become a list.
"""

from dataclasses import dataclass
from typing import Optional, Union

from starlette.datastructures import FormData, UploadFile


@dataclass(frozen=True)
class ScalarField:
    value: str


@dataclass(frozen=True)
class ListField:
    values: tuple[str, ...]


FieldValue = Union[ScalarField, ListField]
RawFormFields = dict[str, FieldValue]
FileValue = Union[UploadFile, list[UploadFile]]
RawFormFiles = dict[str, FileValue]


def first_value(field: Optional[FieldValue]) -> Optional[str]:
    """
    Return the field's value, or its first value when it was repeated.

    Returns None for a missing field (or an empty list) so callers can apply
    their own default.
    """
    if field is None:
        return None
    if isinstance(field, ListField):
        return field.values[0] if field.values else None
    return field.value


def fields_from_form(form: FormData) -> RawFormFields:
    """Collect the text parts of a parsed form, keyed by field name."""
    fields: RawFormFields = {}
    for key in form.keys():
        values = [v for v in form.getlist(key) if isinstance(v, str)]
        if not values:
            continue
        if len(values) == 1:
            fields[key] = ScalarField(values[0])
        else:
            fields[key] = ListField(tuple(values))
    return fields


def files_from_form(form: FormData) -> RawFormFiles:
    """Collect the file parts of a parsed form, keyed by field name."""
    files: RawFormFiles = {}
    for key in form.keys():
        uploads = [v for v in form.getlist(key) if isinstance(v, UploadFile)]
        if not uploads:
            continue
        files[key] = uploads[0] if len(uploads) == 1 else uploads
    return files


def describe_fields(fields: RawFormFields) -> dict[str, Union[str, list[str]]]:
    """Plain-dict view of the text fields, for log lines."""
    return {
        key: list(field.values) if isinstance(field, ListField) else field.value
        for key, field in fields.items()
    }
