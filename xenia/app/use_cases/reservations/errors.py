from xenia.libs.result import Error

RESERVATION_NOT_FOUND = Error("NOT_FOUND", "Not found")
PROPERTY_NOT_FOUND = Error("PROPERTY_NOT_FOUND", "Property not found")
INVALID_DATES = Error("INVALID_DATES", "checkoutDate must be after checkinDate")
