from __future__ import annotations

from ..candidates.models import Category

# Foods -> venue types that serve them
FOOD_TERMS: dict[str, tuple[str, ...]] = {
    "pizza": ("pizzeria", "italian", "pizza", "trattoria", "neapolitan"),
    "pasta": ("italian", "trattoria", "pasta", "mediterranean"),
    "sushi": ("japanese", "sushi", "asian", "ramen"),
    "ramen": ("japanese", "ramen", "noodle", "asian"),
    "tacos": ("mexican", "taqueria", "tex-mex", "latin"),
    "burritos": ("mexican", "taqueria", "tex-mex", "burrito"),
    "burger": ("burger", "american", "grill", "diner", "pub"),
    "burgers": ("burger", "american", "grill", "diner", "pub"),
    "steak": ("steakhouse", "grill", "american", "chophouse"),
    "bbq": ("barbecue", "bbq", "smokehouse", "grill", "southern"),
    "barbecue": ("barbecue", "bbq", "smokehouse", "grill", "southern"),
    "wings": ("wings", "sports bar", "pub", "american", "buffalo"),
    "fried chicken": ("chicken", "southern", "soul food", "american"),
    "pho": ("vietnamese", "pho", "asian", "noodle"),
    "curry": ("indian", "thai", "curry", "asian"),
    "naan": ("indian", "curry", "tandoori"),
    "dim sum": ("chinese", "dim sum", "cantonese", "asian"),
    "dumplings": ("chinese", "dumpling", "asian", "dim sum"),
    "pad thai": ("thai", "asian", "noodle"),
    "falafel": ("mediterranean", "middle eastern", "lebanese", "greek"),
    "gyro": ("greek", "mediterranean", "middle eastern"),
    "shawarma": ("middle eastern", "mediterranean", "lebanese"),
    "bagel": ("bagel", "deli", "bakery", "jewish"),
    "sandwich": ("deli", "sandwich", "sub", "cafe"),
    "sub": ("sub", "sandwich", "deli", "hoagie"),
    "soup": ("soup", "cafe", "deli", "bistro"),
    "salad": ("salad", "healthy", "cafe", "mediterranean"),
    "seafood": ("seafood", "fish", "oyster", "crab", "lobster"),
    "lobster": ("seafood", "lobster", "new england"),
    "crab": ("seafood", "crab", "maryland"),
    "fish": ("seafood", "fish", "fish and chips"),
    "croissant": ("bakery", "french", "cafe", "patisserie"),
    "pastry": ("bakery", "patisserie", "cafe", "dessert"),
    "donut": ("donut", "bakery", "breakfast", "coffee"),
    "doughnut": ("donut", "bakery", "breakfast", "coffee"),
    "ice cream": ("ice cream", "gelato", "frozen yogurt", "dessert"),
    "gelato": ("gelato", "ice cream", "italian", "dessert"),
    "cake": ("bakery", "cake", "dessert", "patisserie"),
    "pie": ("bakery", "pie", "dessert", "diner"),
    "pancakes": ("breakfast", "diner", "brunch", "pancake"),
    "waffles": ("breakfast", "waffle", "brunch", "belgian"),
    "eggs": ("breakfast", "brunch", "diner", "cafe"),
    "brunch": ("brunch", "breakfast", "cafe", "bistro"),
    "breakfast": ("breakfast", "brunch", "diner", "cafe"),
}

CUISINE_TERMS: dict[str, tuple[str, ...]] = {
    "italian": ("italian", "pizza", "pasta", "trattoria", "ristorante", "mediterranean"),
    "mexican": ("mexican", "taqueria", "tex-mex", "latin", "cantina"),
    "chinese": ("chinese", "dim sum", "cantonese", "szechuan", "asian"),
    "japanese": ("japanese", "sushi", "ramen", "izakaya", "asian"),
    "thai": ("thai", "asian", "pad thai"),
    "vietnamese": ("vietnamese", "pho", "banh mi", "asian"),
    "indian": ("indian", "curry", "tandoori", "masala"),
    "greek": ("greek", "mediterranean", "gyro"),
    "french": ("french", "bistro", "brasserie", "patisserie"),
    "korean": ("korean", "bbq", "asian", "kimchi"),
    "mediterranean": ("mediterranean", "greek", "lebanese", "turkish", "falafel"),
    "american": ("american", "burger", "grill", "diner", "comfort"),
    "southern": ("southern", "soul food", "comfort", "bbq", "cajun"),
    "asian": ("asian", "chinese", "japanese", "thai", "vietnamese", "korean"),
}

SERVICE_TERMS: dict[str, tuple[str, ...]] = {
    # Retail
    "clothing": ("clothing", "apparel", "fashion", "boutique", "clothes", "wear"),
    "clothes": ("clothing", "apparel", "fashion", "boutique", "clothes", "wear"),
    "shoes": ("shoes", "footwear", "sneakers", "boots", "shoe store"),
    "books": ("bookstore", "books", "bookshop", "reading"),
    "flowers": ("florist", "flowers", "floral", "flower shop"),
    "gifts": ("gift shop", "gifts", "presents", "souvenirs"),
    "jewelry": ("jewelry", "jeweler", "jewellery", "accessories"),
    "toys": ("toy store", "toys", "games", "hobby"),
    "electronics": ("electronics", "tech", "computer", "phone"),
    "furniture": ("furniture", "home", "decor", "interior"),
    "antiques": ("antique", "vintage", "antiques", "collectibles"),
    # Services
    "haircut": ("barber", "salon", "hair", "haircut", "stylist"),
    "hair": ("barber", "salon", "hair", "haircut", "stylist"),
    "barber": ("barber", "barbershop", "haircut", "men's grooming"),
    "salon": ("salon", "beauty", "hair", "spa", "nail"),
    "nails": ("nail salon", "nails", "manicure", "pedicure"),
    "spa": ("spa", "massage", "wellness", "relaxation"),
    "massage": ("massage", "spa", "therapy", "wellness"),
    "gym": ("gym", "fitness", "workout", "exercise", "health club"),
    "fitness": ("gym", "fitness", "workout", "training", "crossfit"),
    "yoga": ("yoga", "pilates", "wellness", "studio"),
    "dentist": ("dentist", "dental", "orthodontist"),
    "doctor": ("doctor", "clinic", "medical", "physician"),
    "vet": ("veterinarian", "vet", "animal", "pet clinic"),
    "pet": ("pet store", "pet", "animal", "dog", "cat"),
    "auto": ("auto", "car", "mechanic", "automotive", "repair"),
    "car": ("auto", "car", "mechanic", "automotive", "detailing"),
    "laundry": ("laundry", "dry cleaning", "cleaners", "laundromat"),
    "cleaning": ("cleaning", "dry cleaning", "laundry", "cleaners"),
    # Entertainment
    "movie": ("theater", "cinema", "movie", "film"),
    "music": ("music", "concert", "live music", "venue", "record"),
    "art": ("art gallery", "gallery", "art", "museum"),
    "bowling": ("bowling", "entertainment", "arcade"),
    "arcade": ("arcade", "games", "entertainment", "fun"),
    "escape room": ("escape room", "entertainment", "puzzle"),
    # Food & drink
    "coffee": ("coffee", "cafe", "coffeehouse", "espresso", "roaster"),
    "tea": ("tea", "tea house", "cafe", "bubble tea", "boba"),
    "boba": ("boba", "bubble tea", "tea", "asian"),
    "beer": ("brewery", "beer", "pub", "taproom", "craft beer"),
    "wine": ("wine bar", "wine", "winery", "vineyard"),
    "cocktail": ("cocktail", "bar", "lounge", "speakeasy"),
    "bar": ("bar", "pub", "tavern", "lounge", "sports bar"),
    "bakery": ("bakery", "bread", "pastry", "cake", "patisserie"),
    "deli": ("deli", "delicatessen", "sandwich", "sub"),
    "cafe": ("cafe", "coffee", "bistro", "coffeehouse"),
}

SPELLING_CORRECTIONS: dict[str, str] = {
    "resturant": "restaurant",
    "restraunt": "restaurant",
    "restaraunt": "restaurant",
    "resteraunt": "restaurant",
    "restarant": "restaurant",
    "coffe": "coffee",
    "cofee": "coffee",
    "expresso": "espresso",
    "sandwhich": "sandwich",
    "sandwitch": "sandwich",
    "buger": "burger",
    "burgar": "burger",
    "chineese": "chinese",
    "japaneese": "japanese",
    "italain": "italian",
    "mexcian": "mexican",
    "breakfest": "breakfast",
    "breakfat": "breakfast",
    "deserts": "desserts",
    "desert": "dessert",
    "barbar": "barber",
    "saloon": "salon",
    "jewerley": "jewelry",
    "jewlery": "jewelry",
}

CATEGORY_KEYWORDS: dict[Category, tuple[str, ...]] = {
    Category.food: (
        "restaurant", "cafe", "food", "eat", "dining", "cuisine", "kitchen", "bistro",
        "grill", "bakery", "deli", "pizzeria", "taqueria",
    ),
    Category.retail: ("shop", "store", "boutique", "market", "mall", "retail", "buy", "shopping"),
    Category.services: (
        "salon", "barber", "spa", "repair", "cleaning", "service", "dentist", "doctor",
        "clinic", "mechanic",
    ),
    Category.entertainment: (
        "theater", "cinema", "museum", "gallery", "bowling", "arcade", "entertainment",
        "fun", "games",
    ),
    Category.health: ("gym", "fitness", "yoga", "wellness", "health", "medical", "clinic", "therapy"),
}

# Default provider queries that steer toward independents
LOCAL_BUSINESS_QUERIES: tuple[str, ...] = (
    "family owned restaurant",
    "local cafe",
    "independent coffee shop",
    "neighborhood bakery",
    "small business",
)

CATEGORY_LOCAL_QUERIES: dict[Category, tuple[str, ...]] = {
    Category.food: ("family restaurant", "local cafe", "neighborhood bakery", "mom and pop restaurant"),
    Category.retail: ("local shop", "boutique", "independent bookstore", "family owned store"),
    Category.services: ("local salon", "neighborhood barber", "family owned business", "local spa"),
    Category.entertainment: ("independent theater", "local art gallery", "community center"),
    Category.health: ("local pharmacy", "family practice", "neighborhood clinic"),
}
