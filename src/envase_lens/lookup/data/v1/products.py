"""Product lookup table v1 (Anexo II RD 1055/2022)."""

MATERIALS = {
    "PET": {"material_name": "Polietileno tereftalato", "material_code": "01", "material_abbrev": "PET"},
    "HDPE": {"material_name": "Polietileno de alta densidad", "material_code": "02", "material_abbrev": "HDPE"},
    "LDPE": {"material_name": "Polietileno de baja densidad", "material_code": "04", "material_abbrev": "LDPE"},
    "PP": {"material_name": "Polipropileno", "material_code": "05", "material_abbrev": "PP"},
    "PS": {"material_name": "Poliestireno", "material_code": "06", "material_abbrev": "PS"},
    "PAP_BOX": {"material_name": "Cartón", "material_code": "21", "material_abbrev": "PAP"},
    "PAP_PAPER": {"material_name": "Papel", "material_code": "22", "material_abbrev": "PAP"},
    "FE": {"material_name": "Acero", "material_code": "40", "material_abbrev": "FE"},
    "ALU": {"material_name": "Aluminio", "material_code": "41", "material_abbrev": "ALU"},
    "GL": {"material_name": "Vidrio incoloro", "material_code": "70", "material_abbrev": "GL"},
    "BRICK": {"material_name": "Envase compuesto papel/cartón", "material_code": "81", "material_abbrev": "C/PAP"},
    "CPAP": {"material_name": "Envase compuesto plástico", "material_code": "84", "material_abbrev": "C/PAP"},
}

_BEER = [
    "cerveza", "beer", "birra", "mahou", "estrella damm", "san miguel",
    "heineken", "corona", "moritz", "alhambra", "amstel", "voll-damm",
]

PRODUCTS = [
    {
        "name": "agua_mineral",
        "keywords": [
            "agua mineral", "agua embotellada", "botella de agua", "agua con gas",
            "agua sin gas", "fontvella", "font vella", "aquarel", "evian", "agua de manantial",
        ],
        "materials": [
            {"part": "cuerpo", "material": "PET", "evidence": "Botella PET transparente estándar para agua mineral"},
            {"part": "tapón", "material": "PP", "evidence": "Tapón de rosca PP estándar"},
        ],
    },
    {
        "name": "leche_brick",
        "keywords": [
            "leche entera", "leche semi", "leche desnatada", "leche uht", "leche brick",
            "brick de leche", "leche larga duración", "pascual", "puleva", "asturiana",
            "central lechera",
        ],
        "materials": [
            {"part": "cuerpo", "material": "BRICK", "evidence": "Brick multicapa Tetra Pak para leche UHT"},
        ],
    },
    {
        "name": "yogur",
        "keywords": [
            "yogur", "yogurt", "yogures", "danone", "activia", "yoplait", "tarrina yogur",
            "bífidus", "bifidus", "yoghurt", "actimel",
        ],
        "materials": [
            {"part": "cuerpo", "material": "PS", "evidence": "Tarrina de PS rígido blanco estándar"},
            {"part": "tapa", "material": "ALU", "evidence": "Tapa de aluminio termosellado"},
        ],
    },
    {
        "name": "mantequilla",
        "keywords": [
            "mantequilla", "mantequilla sin sal", "mantequilla con sal", "butter", "lurpak",
            "kerrygold", "president mantequilla", "mantequilla artesana",
        ],
        "materials": [
            {"part": "envoltorio", "material": "ALU", "evidence": "Film de aluminio interior de la mantequilla"},
            {"part": "caja exterior", "material": "PAP_BOX", "evidence": "Caja de cartón exterior"},
        ],
    },
    {
        "name": "nata_brick",
        "keywords": [
            "nata líquida", "nata liquida", "nata para cocinar", "nata montada",
            "crema de leche", "nata fresca", "whipping cream", "nata brick",
        ],
        "materials": [
            {"part": "cuerpo", "material": "BRICK", "evidence": "Brick multicapa para nata líquida"},
        ],
    },
    {
        "name": "leche_condensada",
        "keywords": [
            "leche condensada", "leche condensada entera", "la lechera", "condensada",
            "leche condensada azucarada", "condensed milk",
        ],
        "materials": [
            {"part": "cuerpo", "material": "FE", "evidence": "Lata de acero para leche condensada"},
        ],
    },
    {
        "name": "queso_fresco",
        "keywords": [
            "queso fresco", "queso de burgos", "queso cottage", "queso batido", "tarrina de queso",
            "mozzarella", "ricotta", "queso crema", "philadelphia", "queso mascarpone",
        ],
        "materials": [
            {"part": "cuerpo", "material": "PP", "evidence": "Tarrina de PP rígido para queso fresco"},
            {"part": "tapa", "material": "PP", "evidence": "Tapa de PP estándar"},
        ],
    },
    {
        "name": "cerveza_lata",
        "keywords": _BEER,
        "packaging_types": ["can"],
        "materials": [
            {"part": "cuerpo", "material": "ALU", "evidence": "Lata de aluminio estándar para cerveza"},
        ],
    },
    {
        "name": "cerveza_botella",
        "keywords": _BEER,
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "GL", "evidence": "Botella de vidrio para cerveza"},
            {"part": "tapón corona", "material": "FE", "evidence": "Chapa metálica de acero"},
        ],
    },
    {
        "name": "vino",
        "keywords": [
            "vino", "vino tinto", "vino blanco", "vino rosado", "botella de vino", "rioja",
            "ribera del duero", "tempranillo", "albariño", "vino joven", "vino crianza",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "GL", "evidence": "Botella de vidrio estándar para vino"},
        ],
    },
    {
        "name": "cava",
        "keywords": [
            "cava", "espumoso", "cava brut", "cava seco", "champagne", "prosecco", "freixenet",
            "codorniu", "gran cremant", "cava reserva", "cava rosado",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "GL", "evidence": "Botella de vidrio para cava o espumoso"},
        ],
    },
    {
        "name": "sidra",
        "keywords": [
            "sidra", "sidra natural", "sidra brut", "cider", "sidra asturiana", "el gaitero",
            "sidrería", "sidra dulce", "hard cider",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "GL", "evidence": "Botella de vidrio para sidra"},
            {"part": "tapón corona", "material": "FE", "evidence": "Chapa metálica de acero"},
        ],
    },
    {
        "name": "refresco_lata",
        "keywords": [
            "refresco", "coca cola", "pepsi", "fanta", "sprite", "seven up", "schweppes",
            "nestea", "cola", "gaseosa lata", "tónica lata", "tonica lata",
        ],
        "packaging_types": ["can"],
        "materials": [
            {"part": "cuerpo", "material": "ALU", "evidence": "Lata de aluminio para refresco"},
        ],
    },
    {
        "name": "refresco_botella",
        "keywords": [
            "refresco", "coca cola", "pepsi", "fanta", "sprite", "seven up", "schweppes",
            "nestea", "cola", "gaseosa", "limonada", "tónica",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "PET", "evidence": "Botella PET para refresco"},
            {"part": "tapón", "material": "PP", "evidence": "Tapón de rosca PP"},
        ],
    },
    {
        "name": "bebida_energetica",
        "keywords": [
            "energética", "energetica", "red bull", "monster", "burn", "rockstar",
            "energizante", "bebida energetica", "energy drink", "relentless",
        ],
        "packaging_types": ["can"],
        "materials": [
            {"part": "cuerpo", "material": "ALU", "evidence": "Lata de aluminio para bebida energética"},
        ],
    },
    {
        "name": "bebida_isotonica",
        "keywords": [
            "isotónica", "isotonica", "deportiva", "powerade", "gatorade", "aquarius",
            "isostar", "sport drink", "electrolitos", "bebida deportiva", "isotonic",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "PET", "evidence": "Botella PET para bebida deportiva"},
            {"part": "tapón", "material": "PP", "evidence": "Tapón de rosca PP"},
        ],
    },
    {
        "name": "zumo_brick",
        "keywords": [
            "zumo brick", "zumo brik", "zumo tetra", "bebida vegetal", "leche avena",
            "leche soja", "leche almendra", "alpro", "oatly", "bebida de avena",
            "bebida de soja", "bebida de arroz",
        ],
        "materials": [
            {"part": "cuerpo", "material": "BRICK", "evidence": "Brick multicapa para zumo o bebida vegetal"},
        ],
    },
    {
        "name": "zumo_botella",
        "keywords": [
            "zumo", "jugo", "néctar", "nectar", "zumo naranja", "zumo manzana", "zumo piña",
            "jugo natural", "don simon", "minute maid", "tropicana",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "PET", "evidence": "Botella PET para zumo"},
            {"part": "tapón", "material": "PP", "evidence": "Tapón de rosca PP"},
        ],
    },
    {
        "name": "zumo_vidrio",
        "keywords": [
            "zumo vidrio", "zumo botella vidrio", "jugo vidrio", "zumo premium vidrio",
            "jugo prensado frío",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "GL", "evidence": "Botella de vidrio para zumo premium"},
            {"part": "tapa metálica", "material": "FE", "evidence": "Tapa metálica de acero"},
        ],
    },
    {
        "name": "aceite_oliva",
        "keywords": [
            "aceite de oliva", "aceite oliva", "aove", "aceite virgen extra", "aceite oliva virgen",
            "arbequina", "hojiblanca", "picual", "aceite de oliva premium",
        ],
        "packaging_types": ["bottle", "jar"],
        "materials": [
            {"part": "cuerpo", "material": "GL", "evidence": "Botella de vidrio para aceite de oliva"},
            {"part": "tapón", "material": "PP", "evidence": "Tapón de rosca PP"},
        ],
    },
    {
        "name": "aceite_girasol",
        "keywords": [
            "aceite girasol", "aceite de girasol", "aceite vegetal", "garrafa de aceite",
            "aceite refinado", "aceite de maíz", "aceite de colza", "aceite de semillas",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "PET", "evidence": "Botella PET o garrafa para aceite vegetal"},
            {"part": "tapón", "material": "PP", "evidence": "Tapón de rosca PP"},
        ],
    },
    {
        "name": "vinagre",
        "keywords": [
            "vinagre", "vinagre de vino", "vinagre de manzana", "vinagre balsámico",
            "vinagre balsamico", "aceto", "vinagre de jerez", "vinagre de sidra", "balsamic vinegar",
        ],
        "packaging_types": ["bottle", "jar"],
        "materials": [
            {"part": "cuerpo", "material": "GL", "evidence": "Botella de vidrio para vinagre"},
            {"part": "tapón", "material": "PP", "evidence": "Tapón de rosca PP"},
        ],
    },
    {
        "name": "ketchup",
        "keywords": [
            "ketchup", "catsup", "salsa ketchup", "heinz", "orlando ketchup", "ketchup squeeze",
            "tomato ketchup", "salsa tomate squeeze",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "PET", "evidence": "Envase squeeze de PET para ketchup"},
            {"part": "tapón dosificador", "material": "PP", "evidence": "Tapón dosificador de PP"},
        ],
    },
    {
        "name": "mayonesa_vidrio",
        "keywords": [
            "mayonesa vidrio", "mahonesa vidrio", "mayonesa tarro vidrio", "mayonesa en tarro",
            "hellmann vidrio", "mayonesa artesana",
        ],
        "packaging_types": ["jar"],
        "materials": [
            {"part": "cuerpo", "material": "GL", "evidence": "Tarro de vidrio para mayonesa"},
            {"part": "tapa", "material": "FE", "evidence": "Tapa metálica de acero"},
        ],
    },
    {
        "name": "mayonesa",
        "keywords": [
            "mayonesa", "mahonesa", "hellmann", "calvé", "calve", "mayonesa light",
            "mayonesa casera", "salsa mayonesa",
        ],
        "materials": [
            {"part": "cuerpo", "material": "PP", "evidence": "Bote de PP para mayonesa"},
            {"part": "tapa", "material": "PP", "evidence": "Tapa de PP"},
        ],
    },
    {
        "name": "tomate_vidrio",
        "keywords": [
            "tomate frito vidrio", "tomate natural vidrio", "tomate triturado vidrio",
            "passata vidrio", "salsa tomate vidrio", "tomate frito tarro",
        ],
        "packaging_types": ["jar", "bottle"],
        "materials": [
            {"part": "cuerpo", "material": "GL", "evidence": "Tarro o botella de vidrio para tomate"},
            {"part": "tapa", "material": "FE", "evidence": "Tapa metálica de acero"},
        ],
    },
    {
        "name": "tomate_brick",
        "keywords": [
            "tomate frito brick", "gazpacho brick", "gazpacho tetra", "tomate tetra",
            "passata brick", "gazpacho carton", "salmorejo brick",
        ],
        "materials": [
            {"part": "cuerpo", "material": "BRICK", "evidence": "Brick multicapa para tomate frito o gazpacho"},
        ],
    },
    {
        "name": "mermelada",
        "keywords": [
            "mermelada", "confitura", "jam", "mermelada fresa", "mermelada naranja",
            "confitura artesanal", "bonne maman", "hero mermelada", "mermelada sin azúcar",
        ],
        "packaging_types": ["jar"],
        "materials": [
            {"part": "cuerpo", "material": "GL", "evidence": "Tarro de vidrio para mermelada"},
            {"part": "tapa", "material": "FE", "evidence": "Tapa metálica de acero"},
        ],
    },
    {
        "name": "miel",
        "keywords": [
            "miel", "honey", "miel de abeja", "miel de flores", "miel cruda", "miel artesanal",
            "apícola", "miel de romero", "miel ecológica",
        ],
        "packaging_types": ["jar"],
        "materials": [
            {"part": "cuerpo", "material": "GL", "evidence": "Tarro de vidrio para miel"},
            {"part": "tapa", "material": "FE", "evidence": "Tapa metálica de acero"},
        ],
    },
    {
        "name": "aceitunas",
        "keywords": [
            "aceitunas", "olivas", "aceitunas verdes", "aceitunas negras", "aceitunas rellenas",
            "manzanilla", "olives", "aceitunas camperas", "aceituna gordal",
        ],
        "packaging_types": ["jar"],
        "materials": [
            {"part": "cuerpo", "material": "GL", "evidence": "Tarro de vidrio para aceitunas"},
            {"part": "tapa", "material": "FE", "evidence": "Tapa metálica de acero"},
        ],
    },
    {
        "name": "conserva_tomate",
        "keywords": [
            "conserva de tomate", "conservas tomate", "tomate en lata", "tomate lata",
            "tomate triturado lata", "tomate entero lata", "passata lata", "tomate pelado lata",
        ],
        "packaging_types": ["can"],
        "materials": [
            {"part": "cuerpo", "material": "FE", "evidence": "Lata de acero para conserva de tomate"},
        ],
    },
    {
        "name": "atun",
        "keywords": [
            "atún", "atun", "bonito", "atún en aceite", "atún al natural", "bonito del norte",
            "tuna", "atún claro", "atún en escabeche",
        ],
        "packaging_types": ["can"],
        "materials": [
            {"part": "cuerpo", "material": "FE", "evidence": "Lata de acero para conserva de atún"},
        ],
    },
    {
        "name": "sardinas",
        "keywords": [
            "sardinas", "anchoas", "anchovas", "sardina en aceite", "boquerones lata",
            "mejillones lata", "berberechos lata", "caballa lata", "sardine",
        ],
        "packaging_types": ["can"],
        "materials": [
            {"part": "cuerpo", "material": "FE", "evidence": "Lata de acero para conserva de sardinas o anchoas"},
        ],
    },
    {
        "name": "pasta_seca",
        "keywords": [
            "pasta seca", "espagueti", "espaguetis", "macarrones", "penne", "fusilli",
            "tallarines", "lasaña", "lasagna", "fideos", "fettuccine",
        ],
        "packaging_types": ["box"],
        "materials": [
            {"part": "cuerpo", "material": "PAP_BOX", "evidence": "Caja de cartón para pasta seca"},
        ],
    },
    {
        "name": "arroz",
        "keywords": [
            "arroz", "arroz largo", "arroz redondo", "arroz integral", "arroz basmati", "rice",
            "arroz vaporizador", "arroz bomba", "arroz arborio",
        ],
        "packaging_types": ["bag"],
        "materials": [
            {"part": "cuerpo", "material": "LDPE", "evidence": "Bolsa de polietileno para arroz"},
        ],
    },
    {
        "name": "harina",
        "keywords": [
            "harina", "harina de trigo", "harina integral", "harina espelta", "harina maíz",
            "flour", "harina repostería", "harina fuerza", "harina sin gluten",
        ],
        "packaging_types": ["bag"],
        "materials": [
            {"part": "cuerpo", "material": "PAP_PAPER", "evidence": "Bolsa de papel kraft para harina"},
        ],
    },
    {
        "name": "azucar",
        "keywords": [
            "azúcar", "azucar", "azúcar blanco", "azúcar moreno", "azúcar integral",
            "azúcar moreno integral", "sugar", "azúcar glass", "azucar glas",
        ],
        "packaging_types": ["bag"],
        "materials": [
            {"part": "cuerpo", "material": "LDPE", "evidence": "Bolsa de polietileno para azúcar"},
        ],
    },
    {
        "name": "sal",
        "keywords": [
            "sal marina", "sal gruesa", "sal fina", "sal yodada", "sal de mesa", "sal gorda",
            "salinera", "flor de sal", "sal ahumada",
        ],
        "packaging_types": ["box"],
        "materials": [
            {"part": "cuerpo", "material": "PAP_BOX", "evidence": "Caja de cartón para sal"},
        ],
    },
    {
        "name": "cereales",
        "keywords": [
            "cereales", "cornflakes", "muesli", "granola", "copos de avena", "kellogg",
            "nestle cereales", "cheerios", "corn flakes", "cereales desayuno",
        ],
        "packaging_types": ["box"],
        "materials": [
            {"part": "caja", "material": "PAP_BOX", "evidence": "Caja de cartón para cereales de desayuno"},
            {"part": "bolsa interior", "material": "LDPE", "evidence": "Bolsa interior de LDPE"},
        ],
    },
    {
        "name": "cafe_molido",
        "keywords": [
            "café molido", "cafe molido", "café en grano", "cafe en grano", "café natural",
            "cafe natural", "café torrefacto", "ground coffee", "café premium", "cafe gourmet",
        ],
        "packaging_types": ["bag"],
        "materials": [
            {"part": "cuerpo", "material": "CPAP", "evidence": "Bolsa flexible laminada con válvula para café molido"},
        ],
    },
    {
        "name": "cafe_capsulas",
        "keywords": [
            "café en cápsulas", "cápsulas de café", "capsulas de cafe", "café capsulas",
            "nespresso", "dolce gusto", "compatible nespresso", "cápsula café", "capsula cafe",
            "café en capsula",
        ],
        "materials": [
            {"part": "cápsula", "material": "ALU", "evidence": "Cápsula de aluminio estándar para café"},
            {"part": "membrana", "material": "PP", "evidence": "Membrana de PP termosellada de la cápsula"},
        ],
    },
    {
        "name": "galletas",
        "keywords": [
            "galletas", "cookies", "biscuits", "galleta maría", "digestive",
            "galletas campurrianas", "oreo", "chips ahoy", "galletas integrales", "galleta avena",
        ],
        "packaging_types": ["box"],
        "materials": [
            {"part": "caja", "material": "PAP_BOX", "evidence": "Caja de cartón para galletas"},
            {"part": "bandeja interior", "material": "PP", "evidence": "Bandeja o envoltorio interior de PP"},
        ],
    },
    {
        "name": "chocolate",
        "keywords": [
            "chocolate", "tableta chocolate", "chocolate negro", "chocolate con leche",
            "chocolate blanco", "chocolatina", "cacao", "tableta cacao", "chocolate artesano",
        ],
        "packaging_types": ["box"],
        "materials": [
            {"part": "envoltorio laminado", "material": "CPAP", "evidence": "Envoltorio laminado interior del chocolate"},
            {"part": "caja exterior", "material": "PAP_BOX", "evidence": "Caja de cartón exterior"},
        ],
    },
    {
        "name": "patatas_fritas",
        "keywords": [
            "patatas fritas", "chips", "crisps", "lays", "lay's", "ruffles", "doritos",
            "nachos", "snack patatas", "patatas onduladas",
        ],
        "packaging_types": ["bag"],
        "materials": [
            {"part": "cuerpo", "material": "CPAP", "evidence": "Bolsa flexible laminada metalizada para snack"},
        ],
    },
    {
        "name": "frutos_secos",
        "keywords": [
            "frutos secos", "almendras", "nueces", "pistachos", "cacahuetes", "anacardos",
            "mix de frutos", "nuts", "avellanas", "pipas",
        ],
        "packaging_types": ["bag"],
        "materials": [
            {"part": "cuerpo", "material": "CPAP", "evidence": "Bolsa flexible laminada para frutos secos"},
        ],
    },
    {
        "name": "detergente",
        "keywords": [
            "detergente", "detergente lavadora", "detergente ropa", "ariel", "persil", "skip",
            "surf", "wipp", "dash", "detergente liquido",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "HDPE", "evidence": "Botella opaca de HDPE para detergente"},
            {"part": "tapón dosificador", "material": "PP", "evidence": "Tapón dosificador de PP"},
        ],
    },
    {
        "name": "champu",
        "keywords": [
            "champú", "champu", "shampoo", "champú anticaspa", "champú hidratante",
            "head shoulders", "pantene", "elvive", "l'oreal champú", "champú seco",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "HDPE", "evidence": "Botella de HDPE para champú"},
            {"part": "tapón abatible", "material": "PP", "evidence": "Tapón abatible de PP"},
        ],
    },
    {
        "name": "gel_ducha",
        "keywords": [
            "gel de ducha", "gel ducha", "shower gel", "gel corporal", "body wash",
            "jabón líquido", "fa gel", "dove gel", "nivea gel", "gel exfoliante",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "HDPE", "evidence": "Botella de HDPE para gel de ducha"},
            {"part": "tapón abatible", "material": "PP", "evidence": "Tapón abatible de PP"},
        ],
    },
    {
        "name": "suavizante",
        "keywords": [
            "suavizante", "suavizante ropa", "fabric softener", "mimosín", "mimosin", "lenor",
            "vernel", "comfort suavizante", "suavizante concentrado",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "HDPE", "evidence": "Botella de HDPE para suavizante"},
            {"part": "tapón dosificador", "material": "PP", "evidence": "Tapón dosificador de PP"},
        ],
    },
    {
        "name": "lejia",
        "keywords": [
            "lejía", "lejia", "bleach", "hipoclorito", "lejía ropa", "lejía limpieza",
            "neutrex", "estrella lejía", "clorox", "lejía perfumada",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "HDPE", "evidence": "Botella de HDPE para lejía"},
            {"part": "tapón", "material": "PP", "evidence": "Tapón de rosca PP"},
        ],
    },
    {
        "name": "limpiahogar",
        "keywords": [
            "limpiahogar", "limpiador multiusos", "spray limpiador", "limpia hogar",
            "mr musculo", "mr. muscle", "cif spray", "ajax spray", "multiusos", "limpiacristales",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "HDPE", "evidence": "Botella de HDPE con cabezal spray"},
            {"part": "cabezal spray", "material": "PP", "evidence": "Cabezal difusor de PP"},
        ],
    },
    {
        "name": "pasta_dientes",
        "keywords": [
            "pasta de dientes", "pasta dentífrica", "pasta dentrifica", "dentifrico", "colgate",
            "oral b", "oral-b", "sensodyne", "crema dental", "pasta fluor",
        ],
        "packaging_types": ["tube"],
        "materials": [
            {"part": "tubo", "material": "LDPE", "evidence": "Tubo flexible de LDPE para pasta dentífrica"},
            {"part": "tapa", "material": "PP", "evidence": "Tapa de PP del tubo"},
        ],
    },
    {
        "name": "desodorante_aerosol",
        "keywords": [
            "desodorante", "deodorant", "antitranspirante", "axe", "rexona",
            "nivea desodorante", "dove deo", "fa desodorante", "desodorante spray", "deo aerosol",
        ],
        "packaging_types": ["can"],
        "materials": [
            {"part": "cuerpo aerosol", "material": "ALU", "evidence": "Lata de aluminio para aerosol"},
            {"part": "tapa", "material": "PP", "evidence": "Tapa plástica de PP"},
        ],
    },
    {
        "name": "desodorante_roll_on",
        "keywords": [
            "desodorante roll", "roll-on", "roll on", "desodorante bola", "deo roll", "rollon",
            "deodorante roll",
        ],
        "packaging_types": ["bottle"],
        "materials": [
            {"part": "cuerpo", "material": "HDPE", "evidence": "Botella de HDPE para roll-on"},
            {"part": "bola y tapa", "material": "PP", "evidence": "Bola aplicadora y tapa de PP"},
        ],
    },
    {
        "name": "caldo_brick",
        "keywords": [
            "caldo", "consomé", "consome", "consommé", "caldo de pollo", "caldo de verduras",
            "caldo de pescado", "caldo casero", "knorr caldo", "avecrem",
        ],
        "materials": [
            {"part": "cuerpo", "material": "BRICK", "evidence": "Brick multicapa Tetra Pak para caldo o consommé"},
        ],
    },
]
