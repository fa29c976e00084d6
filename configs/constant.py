DAYS_IN_MONTH = 31
DEFAULT_AVAILABLE = True

CATEGORY_ID_PREFIX = "cat-"
PRODUCT_ID_PREFIX = "prod-"

UPLOADS_URL_PREFIX = "/uploads"

SCHEMA_VERSION = 1

FRONTEND_ENTRY_PAGE = "index.html"
