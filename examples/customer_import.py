"""
Reading a customer sheet into records and marking the rows that failed.

    python examples/customer_import.py customers.xlsx

The sheet is expected to look like:

    | Code  | Name          | Email             | Since      | Active | Billing month |
    |-------|---------------|-------------------|------------|--------|---------------|
    | C0001 | Alice Smith   | alice@example.com | 2023-04-01 | Yes    | March         |
"""

import sys

from openpyxl import load_workbook

from excel_records import ExcelRecord, RangeStyle, ReaderConfig, iter_records

HEADERS = ["Code", "Name", "Email", "Since", "Active", "Billing month"]
STATUS_COLUMN = len(HEADERS) + 1

INVALID_ROW = RangeStyle(background_color="#FFC7CE", text_color="#9C0006", border_color="#9C0006")


class CustomerRecord(ExcelRecord):
    def __init__(self, worksheet, row, **kwargs):
        super().__init__(worksheet, row, **kwargs)
        self.code = self.get_string(1, "Code", exact_length=5)
        self.name = self.get_string(2, "Name", max_length=80, trim=True)
        self.email = self.get_email(3, "Email", required=False)
        self.since = self.get_datetime(4, "Customer since")
        self.active = self.get_boolean(5, "Active", required=False)
        self.billing_month = self.get_month_number(6, "Billing month", required=False)

    @property
    def is_empty(self):
        return self.code is None and self.name is None


def main(path: str) -> int:
    workbook = load_workbook(path)
    worksheet = workbook.active

    invalid = 0
    for result in iter_records(worksheet, CustomerRecord, config=ReaderConfig(headers=HEADERS)):
        record = result.record
        if record.is_valid:
            record.set_cell_value(STATUS_COLUMN, "OK")
            continue

        invalid += 1
        record.set_cell_value(STATUS_COLUMN, "\n".join(record.errors), wrap_text=True)
        record.apply_style_range(1, STATUS_COLUMN, INVALID_ROW)

    workbook.save(path)
    print(f"{invalid} invalid rows marked in {path}")
    return 1 if invalid else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1]))
