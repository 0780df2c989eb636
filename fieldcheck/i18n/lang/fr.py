"""Messages de validation en français."""

MESSAGES = {
    "required": "Le champ %s est requis",
    "empty": "Le champ %s ne peut pas être vide",
    "notNull": "Le champ %s ne peut pas être nul",
    "slug": "Le champ %s n'est pas un slug valide",
    "minLength": "Le champ %s doit contenir plus de %d caractères",
    "maxLength": "Le champ %s doit contenir moins de %d caractères",
    "betweenLength": "Le champ %s doit contenir entre %d et %d caractères",
    "datetime": "Le champ %s doit être une date valide (%s)",
    "notEqual": "Le champ %s doit être égal au champ %s",
    "email": "Le champ %s doit être une adresse email valide",
    "integer": "Le champ %s doit être un nombre valide",
    "float": "Le champ %s doit être un nombre à virgule valide",
    "url": "Le champ %s doit être une URL valide",
    "match": "Le champ %s doit être égal à %s",
    "between": "Le champ %s doit être compris entre %d et %d",
    "betweenStrict": "Le champ %s doit être strictement compris entre %d et %d",
    "array": "Le champ %s doit être un tableau",
    "boolean": "Le champ %s doit être un booléen",
    "patternMatch": "Le champ %s ne respecte pas le format attendu",
    "alphaNumerical": "Le champ %s ne doit contenir que des caractères alphanumériques",
    "invalid": "Le champ %s n'est pas valide",
}
