from xenia.libs.result import Error

PROPERTY_NOT_FOUND = Error("NOT_FOUND", "Not found")
OWNER_NOT_FOUND = Error("OWNER_NOT_FOUND", "Owner not found")
