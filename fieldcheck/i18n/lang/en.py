"""English validation messages."""

MESSAGES = {
    "required": "The field %s is required",
    "empty": "The field %s cannot be empty",
    "notNull": "The field %s cannot be null",
    "slug": "The field %s is not a valid slug",
    "minLength": "The field %s must contain more than %d characters",
    "maxLength": "The field %s must contain less than %d characters",
    "betweenLength": "The field %s must contain between %d and %d characters",
    "datetime": "The field %s must be a valid date (%s)",
    "notEqual": "The field %s must be equal to %s",
    "email": "The field %s must be a valid email address",
    "integer": "The field %s must be a valid number",
    "float": "The field %s must be a valid floating point number",
    "url": "The field %s must be a valid URL",
    "match": "The field %s must be equal to %s",
    "between": "The field %s must be between %d and %d",
    "betweenStrict": "The field %s must be strictly between %d and %d",
    "array": "The field %s must be an array",
    "boolean": "The field %s must be a boolean",
    "patternMatch": "The field %s does not match the expected pattern",
    "alphaNumerical": "The field %s must only contain alphanumeric characters",
    "invalid": "The field %s is invalid",
}
