# Fields a demand owner may set on create/update
EDITABLE_DEMAND_FIELDS = [
    "title",
    "description",
    "mobile_number",
    "product_category",
    "service_category",
]
