import pytest

from excel_records.fields import FieldCoercionEngine, FieldDescriptor


@pytest.fixture
def engine():
    return FieldCoercionEngine()


@pytest.fixture
def required_field():
    return FieldDescriptor(column=2, description="Quantity")


@pytest.fixture
def optional_field():
    return FieldDescriptor(column=2, description="Quantity", required=False)
