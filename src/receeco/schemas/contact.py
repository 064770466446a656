from typing import TypedDict


class _ContactUpdateRequired(TypedDict):
    token: str


class ContactUpdateInput(_ContactUpdateRequired, total=False):
    email: str
    phone: str


update_receipt_contact_schema = {
    "type": "object",
    "properties": {
        "token": {
            "type": "string",
            "description": "Receipt token to update",
        },
        "email": {
            "type": "string",
            "description": "Customer email address",
        },
        "phone": {
            "type": "string",
            "description": "Customer phone number",
        },
    },
    "required": ["token"],
}
