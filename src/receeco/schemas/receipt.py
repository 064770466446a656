from typing import List, Optional, TypedDict, Union


class ItemInput(TypedDict):
    name: str
    quantity: Union[int, float]
    unit_price: int
    total_price: int


class _ReceiptInputRequired(TypedDict):
    merchant_string_id: str
    items: List[ItemInput]
    total_amount: int
    category: str


class ReceiptInput(_ReceiptInputRequired, total=False):
    merchant_name: Optional[str]
    merchant_logo: Optional[str]
    accent_color: Optional[str]
    customer_email: Optional[str]
    customer_phone: Optional[str]
    currency: str
    payment_method: Optional[str]
    location: Optional[str]
    transaction_date: str


receipt_item_schema = {
    "type": "array",
    "description": "Line items on the receipt",
    "minItems": 1,
    "items": {
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "Name of the item",
            },
            "quantity": {
                "type": "number",
                "description": "Quantity purchased",
            },
            "unit_price": {
                "type": "integer",
                "description": "Price of one unit in the minor currency unit",
            },
            "total_price": {
                "type": "integer",
                "description": "Line total in the minor currency unit (not recomputed)",
            },
        },
        "required": ["name", "quantity", "unit_price", "total_price"],
    },
}


create_receipt_schema = {
    "type": "object",
    "properties": {
        "merchant_string_id": {
            "type": "string",
            "description": "Merchant identifier registered with Receeco",
        },
        "merchant_name": {
            "type": "string",
            "description": "Display name of the merchant",
        },
        "merchant_logo": {
            "type": "string",
            "description": "URL of the merchant logo",
        },
        "accent_color": {
            "type": "string",
            "description": "Brand colour used on the receipt page (e.g., #8B4513)",
        },
        "customer_email": {
            "type": "string",
            "description": "Customer email address",
        },
        "customer_phone": {
            "type": "string",
            "description": "Customer phone number",
        },
        "items": receipt_item_schema,
        "total_amount": {
            "type": "integer",
            "description": "Receipt total in the minor currency unit",
        },
        "currency": {
            "type": "string",
            "description": "Currency code (defaults to NGN)",
        },
        "category": {
            "type": "string",
            "description": "Spending category (e.g., Grocery, Restaurant)",
        },
        "payment_method": {
            "type": "string",
            "description": "Payment method used (e.g., card, cash)",
        },
        "location": {
            "type": "string",
            "description": "Where the transaction took place",
        },
        "transaction_date": {
            "type": "string",
            "format": "date-time",
            "description": "Transaction time in ISO format (defaults to now)",
        },
    },
    "required": ["merchant_string_id", "items", "total_amount", "category"],
}