from receeco.schemas.contact import ContactUpdateInput, update_receipt_contact_schema
from receeco.schemas.receipt import (
    ItemInput,
    ReceiptInput,
    create_receipt_schema,
    receipt_item_schema,
)

__all__ = [
    "ContactUpdateInput",
    "ItemInput",
    "ReceiptInput",
    "create_receipt_schema",
    "receipt_item_schema",
    "update_receipt_contact_schema",
]
