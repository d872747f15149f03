"""Shared test fixtures for schema_codegen tests."""

import pytest

from schema_codegen.core.schema import (
    ArrayType,
    EnumType,
    FieldDescriptor,
    ModelDescriptor,
    ObjectReference,
    PrimitiveType,
)
from schema_codegen.languages.go.generator import GoCodegen
from schema_codegen.languages.go.naming import GoNamingStrategy
from schema_codegen.languages.go.types import GoTypeResolver


@pytest.fixture
def naming() -> GoNamingStrategy:
    return GoNamingStrategy()


@pytest.fixture
def resolver(naming: GoNamingStrategy) -> GoTypeResolver:
    return GoTypeResolver(naming, known_models=["Pet", "Tag", "Category"])


@pytest.fixture
def pet_model() -> ModelDescriptor:
    return ModelDescriptor(
        name="Pet",
        fields=(
            FieldDescriptor("id", PrimitiveType("integer"), required=True),
            FieldDescriptor("name", PrimitiveType("string"), required=True, pattern="/^[a-z]+$/"),
            FieldDescriptor("created-at", PrimitiveType("date-time")),
            FieldDescriptor("category", ObjectReference("Category"), nullable=True),
            FieldDescriptor("tags", ArrayType(ObjectReference("Tag"))),
            FieldDescriptor("status", EnumType(PrimitiveType("string"), ("available", "sold"))),
            FieldDescriptor("type", PrimitiveType("string")),
        ),
        description="A pet for sale",
    )


@pytest.fixture
def codegen() -> GoCodegen:
    generator = GoCodegen()
    for name in ("Pet", "Tag", "Category"):
        generator.type_resolver.register_model(name)
    return generator
