# auth_validation/rules/pessoa/genero/validator.py
"""Enumerações fixas dos campos categóricos do cadastro."""

ACCOUNT_TYPES = ("CLIENT", "PROVIDER")

SEX_OPTIONS = ("Masculino", "Feminino", "Indefinido")

# Identidades de gênero e orientações aceitas no campo 'genre'
GENRE_OPTIONS = (
    "Heterossexual",
    "Homossexual",
    "Bissexual",
    "Pansexual",
    "Assexual",
    "Demissexual",
    "Queer",
    "Polissexual",
    "Omnissexual",
    "Androsexual",
    "Ginessexual",
    "Skoliosexual",
    "Graysexual",
    "Aromântico",
    "Biromântico",
    "Panromântico",
    "Heterorromântico",
    "Homorromântico",
    "Demiromântico",
    "Arromântico",
    "Neutrois",
    "Bigênero",
    "Trigênero",
    "Pangênero",
    "Aporagênero",
    "Multigênero",
    "Nongênero",
    "Agênero",
    "Intergênero",
    "Fluxo-gênero",
    "Não-binário",
    "Gênero-fluido",
    "Questionando",
    "Cisgênero",
    "Intersexo",
    "Transgênero",
)
