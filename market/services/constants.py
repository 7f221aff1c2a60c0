# Fields a service owner may set on create/update
EDITABLE_SERVICE_FIELDS = [
    "title",
    "description",
    "min_price",
    "max_price",
    "category",
    "experience",
    "address_hall",
    "portfolio_url",
    "mobile_number",
    "images",
]

SIMILAR_SERVICES_LIMIT = 8
