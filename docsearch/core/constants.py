"""Wire-level constants shared by the query builder, decoder and classifier.

Error bodies are compared byte for byte with what the server sends, so
punctuation and spacing here must not change.
"""

# Value sent for tri-state parameters meaning "all attributes"
WILDCARD = "*"

# Side-channel keys inside a search hit
FORMATTED_KEY = "_formatted"
MATCHES_INFO_KEY = "_matchesInfo"

# Authentication header
API_KEY_HEADER = "X-Meili-API-Key"

# Known error bodies (exact match)
BODY_INDEX_ALREADY_EXISTS = (
    '{"message":"Impossible to create index; index already exists"}'
)
BODY_INVALID_INDEX_UID = (
    '{"message":"Index must have a valid uid; Index uid can be of type integer or '
    "string only composed of alphanumeric characters, hyphens (-) and "
    'underscores (_)."}'
)
BODY_CANT_INFER_PRIMARY_KEY = '{"message":"Could not infer a primary key"}'

# Known error bodies (prefix / suffix match)
PREFIX_SERVER_IN_MAINTENANCE = (
    '{"message":"Server is in maintenance, please try again later"'
)
PREFIX_INDEX_NOT_FOUND = '{"message":"Index '
SUFFIX_INDEX_NOT_FOUND = ' not found"}'
