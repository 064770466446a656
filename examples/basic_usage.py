"""Basic usage of the Receeco Python SDK.

Reads RECEECO_API_KEY (and optionally RECEECO_BASE_URL) from the environment
or a .env file, then creates, fetches and updates a receipt.
"""

import logging

from receeco import SDKError, create_client

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("basic-usage")


def main():
    client = create_client()

    try:
        logger.info("Creating a test receipt...")
        receipt = client.create_receipt(
            {
                "merchant_string_id": "test-coffee-shop-python",
                "merchant_name": "Python Demo Coffee Shop",
                "merchant_logo": "https://example.com/logo.png",
                "accent_color": "#8B4513",
                "customer_email": "customer@example.com",
                "items": [
                    {
                        "name": "Cappuccino",
                        "quantity": 2,
                        "unit_price": 500,
                        "total_price": 1000,
                    },
                    {
                        "name": "Croissant",
                        "quantity": 1,
                        "unit_price": 300,
                        "total_price": 300,
                    },
                ],
                "total_amount": 1300,
                "currency": "NGN",
                "payment_method": "card",
                "category": "Restaurant",
                "location": "Lagos, Nigeria",
            }
        )
        logger.info(f"Receipt created: id={receipt['id']} token={receipt['token']}")
        logger.info(f"Receipt URL: {client.receipt_url(receipt['token'])}")

        fetched = client.get_receipt(receipt["token"])
        logger.info(
            f"Fetched receipt for {fetched.get('merchant_name', 'Unknown')}, "
            f"total {fetched.get('total_amount')}, "
            f"email {fetched.get('customer_email') or 'Not provided'}"
        )

        result = client.update_receipt_contact(
            {"token": receipt["token"], "phone": "+2348123456789"}
        )
        logger.info(f"Contact updated: {'Yes' if result.get('success') else 'No'}")

    except SDKError as e:
        logger.error(f"SDK Error [{e.code}]: {e.message}")


if __name__ == "__main__":
    main()
