# Fields a product owner may set on create/update
EDITABLE_PRODUCT_FIELDS = [
    "title",
    "description",
    "price",
    "original_price",
    "product_type",
    "status",
    "condition",
    "age_in_months",
    "category",
    "address_hall",
    "mobile_number",
    "ecommerce_link",
    "invoice_image_url",
    "seasonality",
    "images",
]

SIMILAR_PRODUCTS_LIMIT = 8

# Sort keys accepted by the product listing
PRODUCT_SORT_KEYS = ["newest", "oldest", "price_asc", "price_desc"]
