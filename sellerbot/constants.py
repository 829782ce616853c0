# sellerbot/constants.py

# Add product conversation
(
    WAITING_PRODUCT_NAME,
    WAITING_PRODUCT_CATEGORY,
) = range(2)

# Category request conversation
(
    WAITING_PARENT_CATEGORY,
    WAITING_CATEGORY_NAME,
    WAITING_CATEGORY_NAME_AR,
    WAITING_CATEGORY_DESCRIPTION,
    WAITING_CATEGORY_DESCRIPTION_AR,
    WAITING_BUSINESS_JUSTIFICATION,
    WAITING_EXPECTED_PRODUCT_COUNT,
    WAITING_TARGET_MARKET,
) = range(2, 10)

# Category selector callback data
SELECTOR_ACTIVATE = "sel:act:"
SELECTOR_TOGGLE = "sel:tgl:"
SELECTOR_CLEAR = "sel:clr"
SELECTOR_CANCEL = "sel:cancel"
SELECTOR_PATTERN = r"^sel:"

# user_data keys
LANGUAGE_KEY = "lang"
SELECTOR_KEY = "category_selector"
PRODUCT_DRAFT_KEY = "product_draft"
CATEGORY_REQUEST_KEY = "category_request"

RTL_LANGUAGES = ("ar",)
