# Log event / error codes
MISSING_URL = 'MISSING_URL'
INVALID_URL_SCHEME = 'INVALID_URL_SCHEME'
URL_SHORTENED = 'URL_SHORTENED'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
RATE_LIMIT_EXCEEDED = 'RATE_LIMIT_EXCEEDED'
CORRUPT_PAYLOAD = 'CORRUPT_PAYLOAD'

# Client-facing messages
MISSING_URL_MESSAGE = 'URL parameter in query is required'
INVALID_URL_SCHEME_MESSAGE = 'URL parameter must have the value https:// or http://'
SHORT_URL_NOT_FOUND_MESSAGE = 'This url does not exist in our project'
RATE_LIMIT_EXCEEDED_MESSAGE = 'too many request'
SHORTENED_URL_MESSAGE = 'The shortened url is: {short_url}'

ALLOWED_URL_SCHEMES = ('http://', 'https://')
