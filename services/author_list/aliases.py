"""
Known author name variants and their canonical forms.

Keys match exactly and case-sensitively. No alias target is itself a key,
so one lookup always reaches the canonical name.
"""

from types import MappingProxyType

ALIASES = MappingProxyType({
    "brl": "Bruce Leidl",
    "Fab Torchz": "Fan Jiang",
    "Fab Torchz J": "Fan Jiang",
    "fanjiang": "Fan Jiang",
    "Fan Jiang Torchz": "Fan Jiang",
    "Pedro Enrique Palau": "Pedro Palau",
    "Reinaldo de Souza Jr": "Reinaldo de Souza Junior",
    "sacurio": "Sandy Acurio",
    "Sandy": "Sandy Acurio",
    "cnaranjo": "Cristian Naranjo",
    "ivanjijon": "Ivan Jijon",
    "mvelasco": "Mauro Velasco",
})

# Always listed, even without any commits under this name.
SEED_AUTHORS = (("Adam Langley", ""),)
