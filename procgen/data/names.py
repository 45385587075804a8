"""Built-in personal and place name pools."""

from __future__ import annotations

from procgen.core.templates import NamePool, PlaceNamePool

# ---------------------------------------------------------------------------
# Personal names by origin
# ---------------------------------------------------------------------------

NAME_POOLS: list[NamePool] = [
    NamePool(
        origin="frontier_anglo",
        male_first=(
            "Jedediah", "Silas", "Amos", "Ezra", "Caleb", "Virgil", "Wyatt", "Elijah",
            "Josiah", "Thaddeus", "Hiram", "Cyrus", "Levi", "Morgan", "Walter", "Henry",
        ),
        female_first=(
            "Abigail", "Clementine", "Eliza", "Hattie", "Martha", "Prudence", "Rosalie",
            "Ada", "Cora", "Delia", "Ida", "Lottie", "Mercy", "Nell", "Opal", "Ruth",
        ),
        neutral_first=("Jessie", "Frankie", "Marion", "Sam", "Billie", "Carroll"),
        surnames=(
            "Calloway", "Holt", "Whitaker", "McCrae", "Pruitt", "Garrett", "Hollister",
            "Tate", "Barlow", "Crane", "Dawson", "Fenwick", "Hargrove", "Lockhart",
            "Merriweather", "Prescott", "Rawlins", "Sutter", "Wheeler", "Yancey",
        ),
        nicknames=("Dusty", "Red", "Slim", "Doc", "Lucky", "Tex", "Shorty", "Kit"),
        titles=("Mr.", "Mrs.", "Miss", "Old", "Deacon", "Colonel"),
        patterns=("{{first}} {{last}}",),
        gender_weights=(0.48, 0.45, 0.07),
    ),
    NamePool(
        origin="frontier_hispanic",
        male_first=(
            "Alejandro", "Esteban", "Joaquin", "Mateo", "Ramon", "Tomas", "Diego",
            "Ignacio", "Rafael", "Santiago", "Emilio", "Lorenzo",
        ),
        female_first=(
            "Catalina", "Dolores", "Esperanza", "Guadalupe", "Isabela", "Lucia",
            "Marisol", "Rosario", "Soledad", "Valentina", "Inez", "Paloma",
        ),
        neutral_first=("Cruz", "Guadalupe", "Reyes"),
        surnames=(
            "Alvarado", "Castillo", "Delgado", "Escobar", "Fuentes", "Guerrero",
            "Herrera", "Maldonado", "Navarro", "Ortega", "Quintero", "Valdez",
        ),
        nicknames=("Chato", "Güero", "Flaco", "Chispa", "Paco"),
        titles=("Don", "Doña", "Señor", "Padre"),
        gender_weights=(0.48, 0.45, 0.07),
    ),
    NamePool(
        origin="frontier_native",
        male_first=(
            "Running Elk", "Grey Hawk", "Standing Bear", "Two Rivers", "Lone Wolf",
            "Red Cloud", "Swift Arrow", "Tall Pine",
        ),
        female_first=(
            "Morning Star", "Quiet Water", "Singing Bird", "White Fawn", "Blue Sky",
            "Dancing Leaf", "Little Dove", "Summer Rain",
        ),
        neutral_first=("Far Walker", "Stone Listener", "Many Horses"),
        surnames=(
            "of the Plains", "of the Mesa", "of the River", "of the Canyon",
            "of the Hills", "of the Long Valley",
        ),
        nicknames=("Scout", "Tracker"),
        titles=("Elder",),
        patterns=("{{first}} {{last}}",),
        gender_weights=(0.45, 0.45, 0.1),
    ),
    NamePool(
        origin="frontier_chinese",
        male_first=("Wei", "Jian", "Hong", "Ming", "Tao", "Chen", "Lun", "Bao"),
        female_first=("Mei", "Lian", "Xiu", "Ying", "Hua", "Lan", "Jing", "Yue"),
        neutral_first=("An", "Ping", "Jun"),
        surnames=("Chang", "Li", "Wong", "Lau", "Ng", "Chan", "Ho", "Yee", "Fong", "Lee"),
        nicknames=("Lucky", "Smiling", "Quiet"),
        titles=("Master", "Madam"),
        patterns=("{{first}} {{last}}", "{{last}} {{first}}"),
        gender_weights=(0.5, 0.42, 0.08),
    ),
    NamePool(
        origin="frontier_european",
        male_first=(
            "Anton", "Friedrich", "Gustav", "Henrik", "Johann", "Lars", "Pieter",
            "Stanislaw", "Dmitri", "Giuseppe", "Patrick", "Sean",
        ),
        female_first=(
            "Astrid", "Brigitta", "Greta", "Ingrid", "Katarina", "Magda", "Sofia",
            "Ilse", "Maeve", "Fiona", "Rosa", "Anja",
        ),
        neutral_first=("Alex", "Kris", "Sascha"),
        surnames=(
            "Brandt", "Eriksson", "Hoffmann", "Jansen", "Kowalski", "Lindqvist",
            "O'Malley", "Rossi", "Schultz", "Vogel", "Novak", "Flanagan",
        ),
        nicknames=("Dutch", "Swede", "Irish", "Prof"),
        titles=("Herr", "Frau", "Father", "Professor"),
        gender_weights=(0.48, 0.45, 0.07),
    ),
    NamePool(
        origin="outlaw",
        male_first=("Jesse", "Butch", "Clay", "Cole", "Jack", "Black Bart", "Deuce", "Sundance"),
        female_first=("Belle", "Pearl", "Kate", "Etta", "Cattle Annie", "Little Britches"),
        neutral_first=("Kid", "Ace", "Ringo"),
        surnames=(
            "Blackwood", "Cassidy", "Dalton", "Hardin", "Kilpatrick", "Longbaugh",
            "McCarty", "Starr", "Younger", "Slade", "Vance", "Coe",
        ),
        nicknames=(
            "Mad Dog", "Snake Eyes", "Six-Gun", "Rattler", "The Butcher", "Blackheart",
            "Two-Bit", "Scarface", "Hangman", "Quickdraw",
        ),
        titles=("Boss", "Captain", "Big"),
        patterns=("{{first}} {{last}}",),
        gender_weights=(0.6, 0.35, 0.05),
    ),
    NamePool(
        origin="mechanical",
        male_first=("Unit", "Model", "Series", "Mark"),
        female_first=("Unit", "Model", "Series", "Mark"),
        neutral_first=("Unit", "Model", "Series", "Mark", "Automaton"),
        surnames=(
            "AX-7", "B-12", "C-113", "D-4", "Brass-9", "Cog-21", "Gear-5", "Piston-88",
            "Steam-3", "Valve-42", "Iron-16", "Copper-60",
        ),
        nicknames=("Tin Man", "Clanker", "Old Sparks", "Rusty", "Boiler"),
        titles=("Foreman", "Sentry", "Mechanical"),
        patterns=("{{first}} {{last}}",),
        gender_weights=(0.0, 0.0, 1.0),
    ),
]

# ---------------------------------------------------------------------------
# Place names
# ---------------------------------------------------------------------------

_COMMON_ADJECTIVES = (
    "Red", "Black", "Golden", "Silver", "Copper", "Iron", "Dusty", "Broken", "Dead",
    "Lost", "Hidden", "Silent", "Lonely", "Crooked", "Hollow", "Burnt", "Rusted",
    "High", "Far", "Long", "Deep", "Rocky", "Windy", "Scorched", "Coyote", "Rattler",
    "Vulture", "Wolf", "Eagle", "Lawless", "Lonesome",
)

_COMMON_POSSESSIVES = (
    "Smith's", "Murphy's", "Johnson's", "Miller's", "O'Brien's", "Carter's",
    "Dead Man's", "Devil's", "Widow's", "Gambler's", "Preacher's", "Outlaw's",
)

PLACE_NAME_POOLS: list[PlaceNamePool] = [
    PlaceNamePool(
        pool_type="town_names",
        adjectives=_COMMON_ADJECTIVES,
        nouns=(
            "Gulch", "Creek", "Mesa", "Ridge", "Canyon", "Bluff", "Rock", "Butte",
            "Flats", "Hollow", "Bend", "Wells", "Spur", "Pass", "Fork",
        ),
        suffixes=("Springs", "Junction", "Crossing", "Landing", "City", "ville", "town", "Falls"),
        possessives=_COMMON_POSSESSIVES,
        patterns=(
            "{{adj}} {{noun}}",
            "{{noun}} {{suffix}}",
            "{{adj}} {{noun}} {{suffix}}",
            "{{possessive}} {{noun}}",
            "{{possessive}} {{suffix}}",
            "Fort {{noun}}",
            "{{adj}}{{suffix}}",
            "{{noun}} City",
        ),
        tags=("town", "settlement"),
    ),
    PlaceNamePool(
        pool_type="ranch_names",
        adjectives=("Lazy", "Running", "Flying", "Double", "Rocking", "Broken", "Lucky", "Lone"),
        nouns=("Horseshoe", "Diamond", "Spur", "Star", "Longhorn", "Saddle", "Arrow", "Bar"),
        suffixes=("Ranch", "Spread", "Station", "Homestead"),
        possessives=_COMMON_POSSESSIVES,
        patterns=(
            "{{adj}} {{noun}} {{suffix}}",
            "The {{adj}} {{noun}}",
            "{{possessive}} {{suffix}}",
            "{{noun}} {{suffix}}",
            "{{letter}}-{{letter}} {{suffix}}",
        ),
        tags=("ranch", "rural"),
    ),
    PlaceNamePool(
        pool_type="mine_names",
        adjectives=("Lucky", "Golden", "Lost", "Glory", "Silver", "Deep", "Black", "Big"),
        nouns=("Strike", "Lode", "Vein", "Nugget", "Shaft", "Hole", "Seam"),
        suffixes=("Mine", "Claim", "Diggings", "Works"),
        possessives=_COMMON_POSSESSIVES,
        patterns=(
            "{{adj}} {{noun}} {{suffix}}",
            "The {{adj}} {{noun}}",
            "{{possessive}} {{suffix}}",
            "Shaft {{number}}",
            "{{noun}} No. {{number}}",
        ),
        tags=("mine", "industry"),
    ),
    PlaceNamePool(
        pool_type="landmark_names",
        adjectives=_COMMON_ADJECTIVES + ("Painted", "Twin", "Sleeping", "Bleached"),
        nouns=("Canyon", "Mesa", "Peaks", "Badlands", "Basin", "Valley", "Buttes", "Plateau"),
        suffixes=("Overlook", "Point", "Reach", "Expanse"),
        possessives=_COMMON_POSSESSIVES,
        patterns=(
            "{{adj}} {{noun}}",
            "{{possessive}} {{noun}}",
            "{{noun}} {{suffix}}",
            "{{adj}} {{noun}} {{suffix}}",
        ),
        tags=("landmark", "natural"),
    ),
    PlaceNamePool(
        pool_type="outpost_names",
        adjectives=("Last", "Lonely", "Far", "Windy", "Dry", "Broken", "Halfway"),
        nouns=("Creek", "Ridge", "Wells", "Trail", "Mesa", "Bluff"),
        suffixes=("Post", "Station", "Stop", "Camp", "Outpost"),
        possessives=("Trader's", "Scout's", "Drover's", "Smith's", "Miller's"),
        patterns=(
            "{{adj}} {{noun}} {{suffix}}",
            "{{possessive}} {{suffix}}",
            "{{adj}} {{suffix}}",
            "Mile {{number}} {{suffix}}",
        ),
        tags=("outpost", "waystation"),
    ),
    PlaceNamePool(
        pool_type="station_names",
        adjectives=("Iron", "Grand", "Central", "Junction", "Summit", "Copper"),
        nouns=("Valley", "Ridge", "Creek", "Pass", "Flats"),
        suffixes=("Station", "Depot", "Terminal", "Siding"),
        possessives=("Baker's", "Gould's", "Harriman's", "Crocker's"),
        patterns=("{{adj}} {{noun}} {{suffix}}", "{{noun}} {{suffix}}", "{{possessive}} {{suffix}}"),
        tags=("station", "railroad"),
    ),
]

# Place name pool used for each world location type
LOCATION_NAME_POOL: dict[str, str] = {
    "frontier_town": "town_names",
    "cattle_town": "town_names",
    "mining_town": "mine_names",
    "outpost": "outpost_names",
    "ranch": "ranch_names",
    "homestead": "ranch_names",
}
