import pytest
from openpyxl import Workbook

from excel_records import ExcelRecord, FieldCoercionEngine


class ProductRecord(ExcelRecord):
    """Three-column record used across the workbook tests."""

    def __init__(self, worksheet, row, **kwargs):
        super().__init__(worksheet, row, **kwargs)
        self.code = self.get_string(1, "Code", exact_length=5)
        self.name = self.get_string(2, "Name", trim=True)
        self.price = self.get_decimal(3, "Price")

    @property
    def is_empty(self):
        return self.code is None and self.name is None and self.price is None


@pytest.fixture
def product_record():
    return ProductRecord


@pytest.fixture
def engine():
    return FieldCoercionEngine()


@pytest.fixture
def products_workbook():
    """Workbook whose first sheet holds valid, invalid and empty product rows."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Products"

    ws.append(["Code", "Name", "Price"])
    ws.append(["P0001", "Widget", 9.5])
    ws.append(["P02", "Gadget", "cheap"])
    ws.append([None, None, None])
    ws.append(["P0003", " Gizmo ", 12])
    ws.append([None, None, None])

    notes = wb.create_sheet("Notes")
    notes.append(["Imported from the March price list"])
    return wb


@pytest.fixture
def products_sheet(products_workbook):
    return products_workbook["Products"]
