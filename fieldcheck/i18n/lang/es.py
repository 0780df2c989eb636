"""Mensajes de validación en español."""

MESSAGES = {
    "required": "El campo %s es necesario",
    "empty": "El campo %s no puede estar vacío",
    "notNull": "El campo %s no debe ser nulo",
    "slug": "El campo %s no es un slug válido",
    "minLength": "El campo %s debe contener más de %d caracteres",
    "maxLength": "El campo %s debe contener menos de %d caracteres",
    "betweenLength": "El campo %s debe contener entre %d y %d caracteres",
    "datetime": "El campo %s debe ser una fecha válida (%s)",
    "notEqual": "El campo %s debe ser igual al campo %s",
    "email": "El campo %s debe ser un correo electrónico válido",
    "integer": "El campo %s debe ser un número válido",
    "float": "El campo %s debe ser un número de coma flotante válido",
    "url": "El campo %s debe ser un url válido",
    "match": "El campo %s debe ser igual a %s",
    "between": "El campo %s debe estar entre %d y %d",
    "betweenStrict": "El campo %s debe estar estrictamente entre %d y %d",
    "array": "El campo %s debe ser un array",
    "boolean": "El campo %s debe ser un booleano",
    "patternMatch": "El campo %s debe respetar el patrón",
    "alphaNumerical": "El campo %s debe componerse de caracteres alfanuméricos",
    "invalid": "El campo %s no es válido",
}
