# Defaults and fixed values shared by the Receeco client

DEFAULT_BASE_URL = "https://receeco.com/api/trpc"
RECEIPT_WEB_URL = "https://receeco.com/receipt"

# Every request uses this timeout; there is no per-call override
REQUEST_TIMEOUT_SECONDS = 30

# tRPC procedure names exposed by the receipt service
ENDPOINT_CREATE_RECEIPT = "createReceiptFromPOS"
ENDPOINT_GET_RECEIPT = "getReceipt"
ENDPOINT_UPDATE_RECEIPT_CONTACT = "updateReceiptContact"

DEFAULT_CURRENCY = "NGN"
RECEIPT_STATUS_COMPLETED = "completed"

# Identifier alphabets
RECEIPT_TOKEN_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
RECEIPT_TOKEN_SEGMENT_LENGTH = 13
SHORT_CODE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
SHORT_CODE_LENGTH = 6

# Environment variables read by receeco.factory
ENV_API_KEY = "RECEECO_API_KEY"
ENV_BASE_URL = "RECEECO_BASE_URL"
