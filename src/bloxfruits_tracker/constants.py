# Constants
UPSTREAM_URL = "https://www.gamersberg.com/api/blox-fruits/stock"

STORAGE_KEYS = {
    'created_at': 'bloxfruits_createdAt',
    'normal': 'bloxfruits_normalTimer',
    'mirage': 'bloxfruits_mirageTimer',
}

TICK_MS = 1000
DURATIONS = {
    'normal': 4 * 60 * 60 * 1000,
    'mirage': 2 * 60 * 60 * 1000,
}
STOCK_KINDS = ('normal', 'mirage')

IMAGE_PATH_PREFIX = "/images/fruits/"
PLACEHOLDER_IMAGE = "https://placehold.co/64x64?text=%3F"

FRUIT_IMAGES = {
    'Rocket': 'Rocket.webp', 'Spin': 'Spin.webp', 'Blade': 'Blade.webp',
    'Spring': 'Spring.webp', 'Bomb': 'Bomb.webp', 'Smoke': 'Smoke.webp',
    'Spike': 'Spike.webp', 'Flame': 'Flame.webp', 'Ice': 'Ice.webp',
    'Sand': 'Sand.webp', 'Dark': 'Dark.webp', 'Eagle': 'Eagle.webp',
    'Diamond': 'Diamond.webp', 'Light': 'Light.webp', 'Rubber': 'Rubber.webp',
    'Ghost': 'Ghost.webp', 'Magma': 'Magma.webp', 'Quake': 'Quake.webp',
    'Buddha': 'Buddha.webp', 'Love': 'Love.webp', 'Creation': 'Creation.webp',
    'Spider': 'Spider.webp', 'Sound': 'Sound.webp', 'Phoenix': 'Phoenix.webp',
    'Portal': 'Portal.webp', 'Lightning': 'Lightning.webp', 'Pain': 'Pain.webp',
    'Blizzard': 'Blizzard.webp', 'Gravity': 'Gravity.webp', 'Mammoth': 'Mammoth.webp',
    'Dough': 'Dough.webp', 'Shadow': 'Shadow.webp', 'Venom': 'Venom.webp',
    'Gas': 'Gas.webp', 'Control': 'Control.webp', 'Spirit': 'Spirit.webp',
    'Leopard': 'Leopard.webp', 'Yeti': 'Yeti.webp', 'Kitsune': 'Kitsune.webp',
    'Dragon': 'DragonFruitEast.webp',
}

# UI text
NO_DATA_TEXT = "No hay datos disponibles"
NO_STOCK_TEXT = "Sin stock disponible"
LOADING_TEXT = "⏳ Cargando..."
