"""Shared fixtures for json-codegen tests."""

import io

import pytest

from json_codegen.core.config import EmitterConfig
from json_codegen.core.emitter import Emitter, EmitterError
from json_codegen.core.schema import Schema, SchemaType


class RecordingEmitter(Emitter):
    """Emitter that logs every call instead of rendering a language."""

    def __init__(self, config=None, fail_on=None, empty_names=False):
        self.calls = []
        self.fail_on = fail_on
        self.empty_names = empty_names
        super().__init__(config or EmitterConfig())

    @property
    def language_name(self):
        return "recording"

    @property
    def file_extension(self):
        return ".txt"

    def primitive_empty(self):
        return "any"

    def primitive_null(self):
        return "null"

    def primitive_boolean(self):
        return "boolean"

    def primitive_number(self):
        return "number"

    def primitive_string(self):
        return "string"

    def emit_struct(self, out, struct):
        return self._record("struct", out, struct)

    def emit_array(self, out, array):
        return self._record("array", out, array)

    def emit_values(self, out, values):
        return self._record("values", out, values)

    def emit_variant(self, out, variant):
        return self._record("variant", out, variant)

    def emit_union(self, out, union):
        return self._record("union", out, union)

    def _record(self, kind, out, descriptor):
        if kind == self.fail_on:
            raise EmitterError(f"cannot emit {kind}")

        name = "" if self.empty_names else self.type_name(descriptor.path)
        self.calls.append(
            {
                "kind": kind,
                "path": tuple(descriptor.path.tokens()),
                "name": name,
                "descriptor": descriptor,
            }
        )
        out.write(f"{kind} {name}\n")
        return name

    @property
    def kinds(self):
        return [call["kind"] for call in self.calls]

    @property
    def paths(self):
        return [call["path"] for call in self.calls]


def string():
    return Schema.of_type(SchemaType.STRING)


def number():
    return Schema.of_type(SchemaType.NUMBER)


@pytest.fixture
def recorder():
    return RecordingEmitter()


@pytest.fixture
def out():
    return io.StringIO()
