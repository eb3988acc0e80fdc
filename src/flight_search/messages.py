"""User-visible display strings (pt-BR)."""

MISSING_PARAMETERS = "Parâmetros ausentes."
INTERNAL_ERROR = "Erro interno, tente novamente."

# Shown by form-style consumers (CLI, frontend)
FILL_ALL_FIELDS = "Por favor, preencha todos os campos."
NO_FLIGHTS_FOUND = "Nenhuma passagem encontrada."
