"""Curated static merchant catalog (read-only, versioned).

Profiles and transactions are drawn from these pools by position, so any
edit here changes generated output for every seed: bump CATALOG_VERSION.
"""

from __future__ import annotations

from typing import NamedTuple

CATALOG_VERSION = "1"


class FeeType(NamedTuple):
    name: str
    amount: float
    merchant: str


# --- Subscriptions & digital services ---
STREAMING_VIDEO = (
    "Netflix",
    "Amazon Prime Video",
    "Disney+",
    "Hulu",
    "Max",
    "Peacock",
    "Paramount+",
    "Apple TV+",
    "YouTube TV",
    "YouTube Premium",
    "Sling TV",
    "Crunchyroll",
    "Philo",
    "Starz",
    "ESPN+",
)

MUSIC_SUBSCRIPTIONS = (
    "Spotify",
    "Apple Music",
    "YouTube Music",
    "Amazon Music",
    "Pandora",
    "SoundCloud Go+",
    "Tidal",
    "iHeartRadio Plus",
)

CLOUD_STORAGE = (
    "iCloud+",
    "Google Drive",
    "Dropbox",
    "Microsoft OneDrive",
    "Box",
    "Mega",
    "pCloud",
    "Amazon Photos",
)

GYMS = (
    "Planet Fitness",
    "LA Fitness",
    "24 Hour Fitness",
    "Anytime Fitness",
    "Gold's Gym",
    "Crunch Fitness",
    "YMCA",
    "Equinox",
    "Life Time Fitness",
    "Orangetheory Fitness",
    "F45 Training",
    "Snap Fitness",
    "Retro Fitness",
    "Blink Fitness",
    "UFC Gym",
)

SOFTWARE_SUBSCRIPTIONS = (
    "Microsoft 365",
    "Adobe Creative Cloud",
    "Google Workspace",
    "Zoom Pro",
    "Slack Pro",
    "Notion Plus",
    "Evernote Premium",
    "1Password",
    "LastPass Premium",
    "Duolingo Super",
    "Grammarly Premium",
    "Headspace",
    "Calm",
    "WeightWatchers Digital",
    "Noom",
    "New York Times Digital",
    "Wall Street Journal Digital",
    "GitHub Copilot",
    "ChatGPT Plus",
    "HelloFresh",
)

# --- Financial institutions ---
BANKS = (
    "JPMorgan Chase Bank",
    "Bank of America",
    "Wells Fargo Bank",
    "Citibank",
    "U.S. Bank",
    "PNC Bank",
    "Truist Bank",
    "Capital One Bank",
    "TD Bank",
    "Citizens Bank",
    "Fifth Third Bank",
    "KeyBank",
    "Ally Bank",
    "Navy Federal Credit Union",
    "Discover Bank",
    "Charles Schwab Bank",
    "Goldman Sachs Bank USA",
    "Huntington Bank",
    "Regions Bank",
    "BMO Harris Bank",
)

CREDIT_CARDS = (
    "Chase Freedom Flex",
    "Chase Sapphire Preferred",
    "Chase Sapphire Reserve",
    "Bank of America Customized Cash Rewards",
    "Wells Fargo Active Cash",
    "Citi Double Cash",
    "Citi Premier Card",
    "Capital One Venture Rewards",
    "Capital One Quicksilver",
    "American Express Gold Card",
    "American Express Blue Cash Preferred",
    "American Express Platinum Card",
    "Discover it Cash Back",
    "Discover it Chrome",
    "Barclays Uber Visa",
    "Synchrony Amazon Store Card",
    "Target REDcard Credit",
    "Walmart Rewards Card",
    "Lowe's Advantage Card",
    "Costco Anywhere Visa Card",
)

P2P_SERVICES = (
    "PayPal",
    "Cash App",
    "Venmo",
    "Apple Cash",
    "Google Pay",
    "Wise",
    "Western Union",
    "MoneyGram",
    "Remitly",
    "Chime",
)

INVESTMENT_BROKERAGES = (
    "Vanguard",
    "Fidelity Investments",
    "Charles Schwab",
    "Robinhood",
    "E*TRADE",
    "Merrill Edge",
)

CRYPTO_EXCHANGES = (
    "Coinbase",
    "Kraken",
    "Gemini",
    "Binance.US",
    "Crypto.com",
    "Bitstamp",
)

# --- Loans, housing, bills, insurance ---
# Slices: [0:9] auto lenders, [9:12] student loans, [12:] other lenders.
LOAN_SERVICERS = (
    "Ally Financial",
    "Capital One Auto Finance",
    "Wells Fargo Auto",
    "Chase Auto Finance",
    "Santander Consumer USA",
    "Toyota Financial Services",
    "Honda Financial Services",
    "Ford Motor Credit",
    "GM Financial",
    "Navient",
    "Nelnet",
    "SoFi",
    "Discover Personal Loans",
    "Marcus by Goldman Sachs",
    "Upstart",
    "LendingClub",
    "Rocket Mortgage",
    "Freedom Mortgage",
    "Navy Federal Credit Union Loans",
    "OneMain Financial",
)
AUTO_LENDERS = LOAN_SERVICERS[0:9]
STUDENT_LOAN_SERVICERS = LOAN_SERVICERS[9:12]
OTHER_LENDERS = LOAN_SERVICERS[12:]

HOUSING_PROVIDERS = (
    "Greystar Residential",
    "Camden Property Trust",
    "AvalonBay Communities",
    "Equity Residential",
    "Lincoln Property Company",
    "Invitation Homes",
    "Progress Residential",
    "Mid-America Apartment Communities",
    "Essex Property Trust",
    "Rocket Mortgage",
    "Wells Fargo Home Mortgage",
    "Chase Home Lending",
    "Bank of America Home Loans",
    "Local Property Management Co.",
    "Main Street Apartments",
)

UTILITY_PROVIDERS = (
    "Duke Energy",
    "Pacific Gas & Electric",
    "Southern Company",
    "Florida Power & Light",
    "Dominion Energy",
    "Con Edison",
    "National Grid",
    "Xcel Energy",
    "CenterPoint Energy",
    "Entergy",
    "FirstEnergy",
    "PPL Electric Utilities",
    "NV Energy",
    "Georgia Power",
    "Consumers Energy",
    "Reliant Energy",
    "City Utilities",
    "City Water & Sewer",
    "City Gas",
    "County Electric Cooperative",
    "Municipal Electric Authority",
    "Spectrum Utilities",
    "Utility Billing Services",
    "Regional Water Authority",
    "Regional Gas & Electric",
)
UTILITY_TYPES = ("electric", "gas", "water", "combined", "electric")

MOBILE_CARRIERS = (
    "Verizon Wireless",
    "AT&T Wireless",
    "T-Mobile",
    "Google Fi",
    "Xfinity Mobile",
    "Spectrum Mobile",
    "Cricket Wireless",
    "Boost Mobile",
    "Metro by T-Mobile",
    "Mint Mobile",
)

INTERNET_PROVIDERS = (
    "Xfinity Internet",
    "Spectrum Internet",
    "AT&T Fiber",
    "Verizon Fios",
    "Cox Communications",
    "Optimum",
    "Frontier",
    "Google Fiber",
)

AUTO_INSURERS = (
    "State Farm",
    "GEICO",
    "Progressive",
    "Allstate",
    "USAA",
    "Farmers Insurance",
    "Nationwide",
    "Liberty Mutual",
    "Travelers Insurance",
    "AAA Insurance",
)

LIFE_INSURERS = (
    "New York Life",
    "Northwestern Mutual",
    "Prudential",
    "MetLife",
    "Lincoln Financial Group",
)

HOME_INSURERS = (
    "State Farm",
    "Allstate",
    "Liberty Mutual",
    "Farmers Insurance",
    "USAA",
)

HEALTH_INSURERS = (
    "UnitedHealthcare",
    "Anthem Blue Cross Blue Shield",
    "Cigna",
    "Aetna",
    "Kaiser Permanente",
)

# --- Everyday spending ---
RIDESHARE = (
    "Uber",
    "Lyft",
    "Lime Scooters",
    "Bird Scooters",
    "Zipcar",
    "Turo",
    "Enterprise Rent-A-Car",
)

FOOD_DELIVERY = (
    "DoorDash",
    "Uber Eats",
    "Grubhub",
    "Postmates",
    "Instacart",
    "Shipt",
    "Seamless",
    "Caviar",
    "Pizza Hut Delivery",
    "Domino's Delivery",
    "Papa Johns Delivery",
    "Chick-fil-A Delivery",
    "Panera Bread Delivery",
    "Gopuff",
    "Amazon Fresh",
)

GAS_STATIONS = (
    "Shell",
    "Chevron",
    "BP",
    "Exxon",
    "Mobil",
    "Texaco",
    "Valero",
    "Speedway",
    "Circle K",
    "7-Eleven",
    "Wawa",
    "QuikTrip",
    "Casey's General Store",
    "Buc-ee's",
    "Sunoco",
    "Marathon",
    "Phillips 66",
    "Citgo",
    "Cumberland Farms",
    "RaceTrac",
    "Raceway",
    "Sheetz",
    "Kwik Trip",
    "Love's Travel Stops",
    "Pilot Flying J",
)

GROCERY_STORES = (
    "Walmart",
    "Kroger",
    "Costco",
    "Sam's Club",
    "Target",
    "Aldi",
    "Publix",
    "Whole Foods Market",
    "Trader Joe's",
    "Safeway",
    "Albertsons",
    "H-E-B",
    "Meijer",
    "WinCo Foods",
    "Food Lion",
    "Giant Food",
    "Giant Eagle",
    "Wegmans",
    "Hy-Vee",
    "Harris Teeter",
    "Fred Meyer",
    "Sprouts Farmers Market",
    "BJ's Wholesale Club",
    "Ralphs",
    "Smith's Food & Drug",
    "Vons",
    "Piggly Wiggly",
    "Ingles Markets",
    "King Soopers",
    "Fry's Food Stores",
)

RESTAURANTS = (
    "Olive Garden",
    "Chili's Grill & Bar",
    "Applebee's",
    "Texas Roadhouse",
    "Outback Steakhouse",
    "LongHorn Steakhouse",
    "Red Lobster",
    "Cracker Barrel",
    "IHOP",
    "Denny's",
    "The Cheesecake Factory",
    "Buffalo Wild Wings",
    "Red Robin",
    "TGI Fridays",
    "P.F. Chang's",
    "Carrabba's Italian Grill",
    "Bonefish Grill",
    "Logan's Roadhouse",
    "Waffle House",
    "Perkins Restaurant & Bakery",
    "Ruby Tuesday",
    "BJ's Restaurant & Brewhouse",
    "Golden Corral",
    "O'Charley's",
    "Hooters",
)

FAST_FOOD = (
    "McDonald's",
    "Burger King",
    "Wendy's",
    "Taco Bell",
    "KFC",
    "Popeyes",
    "Chick-fil-A",
    "Subway",
    "Domino's Pizza",
    "Pizza Hut",
    "Little Caesars",
    "Papa Johns",
    "Sonic Drive-In",
    "Jack in the Box",
    "Dairy Queen",
    "Whataburger",
    "Culver's",
    "Raising Cane's",
    "Chipotle Mexican Grill",
    "Panera Bread",
    "Five Guys",
    "Jimmy John's",
    "Jersey Mike's Subs",
    "Checkers / Rally's",
    "Hardee's",
    "Carl's Jr.",
    "Del Taco",
    "Wingstop",
    "Zaxby's",
    "In-N-Out Burger",
)

COFFEE_SHOPS = (
    "Starbucks",
    "Dunkin'",
    "Tim Hortons",
    "Peet's Coffee",
    "Caribou Coffee",
    "Dutch Bros Coffee",
    "The Human Bean",
    "Biggby Coffee",
    "Scooter's Coffee",
    "Blue Bottle Coffee",
    "Philz Coffee",
    "Joe & The Juice",
    "Krispy Kreme",
    "Local Cafe #1",
    "Local Cafe #2",
)

RETAIL_STORES = (
    "Walmart",
    "Target",
    "Best Buy",
    "Home Depot",
    "Lowe's",
    "Menards",
    "IKEA",
    "Bed Bath & Beyond",
    "Kohl's",
    "Macy's",
    "JCPenney",
    "Nordstrom",
    "TJ Maxx",
    "Marshalls",
    "Ross Dress for Less",
    "Burlington",
    "Academy Sports + Outdoors",
    "Dick's Sporting Goods",
    "REI",
    "Michaels",
    "Hobby Lobby",
    "Staples",
    "Office Depot / OfficeMax",
    "PetSmart",
    "Petco",
)

ONLINE_SHOPS = (
    "Amazon",
    "Walmart.com",
    "Target.com",
    "eBay",
    "Etsy",
    "AliExpress",
    "Temu",
    "Shein",
    "StockX",
    "GOAT",
    "Wayfair",
    "Chewy",
    "Wish",
    "Zappos",
    "Shopify Store",
    "TikTok Shop",
    "Fashion Nova",
    "ASOS",
    "Newegg",
    "B&H Photo Video",
)

UNCLASSIFIED_MERCHANTS = (
    "Corner Street Vendor",
    "Local Gift Shop",
    "Downtown Market Stall",
    "Neighborhood Flea Market",
    "Pop-Up Shop",
)

# --- List prices (monthly, USD) ---
STREAMING_PRICES: dict[str, float] = {
    "Netflix": 15.99,
    "Hulu": 12.99,
    "Disney+": 10.99,
    "Max": 15.99,
    "Amazon Prime Video": 8.99,
    "Peacock": 5.99,
    "Paramount+": 9.99,
    "Apple TV+": 6.99,
    "YouTube TV": 72.99,
    "YouTube Premium": 13.99,
    "Sling TV": 40.00,
    "Crunchyroll": 7.99,
    "Philo": 25.00,
    "Starz": 9.99,
    "ESPN+": 10.99,
}

MUSIC_PRICES: dict[str, float] = {
    "Spotify": 11.99,
    "Apple Music": 10.99,
    "YouTube Music": 10.99,
    "Amazon Music": 9.99,
    "Tidal": 10.99,
}
MUSIC_DEFAULT_PRICE = 10.99

CLOUD_PRICES: dict[str, float] = {
    "iCloud+": 2.99,
    "Google Drive": 2.99,
    "Dropbox": 11.99,
    "Microsoft OneDrive": 6.99,
    "Box": 10.00,
    "Mega": 4.99,
    "pCloud": 4.99,
    "Amazon Photos": 1.99,
}

SOFTWARE_PRICES: dict[str, float] = {
    "Microsoft 365": 9.99,
    "Adobe Creative Cloud": 54.99,
    "Google Workspace": 12.00,
    "Zoom Pro": 14.99,
    "Slack Pro": 7.25,
    "Notion Plus": 8.00,
    "Evernote Premium": 7.99,
    "1Password": 2.99,
    "LastPass Premium": 3.00,
    "Duolingo Super": 12.99,
    "Grammarly Premium": 12.00,
    "Headspace": 12.99,
    "Calm": 14.99,
    "WeightWatchers Digital": 10.99,
    "Noom": 59.00,
    "New York Times Digital": 4.25,
    "Wall Street Journal Digital": 4.99,
    "GitHub Copilot": 19.00,
    "ChatGPT Plus": 20.00,
    "HelloFresh": 79.99,
}

GYM_PRICES = (24.99, 49.99)

# --- Fees ---
FEE_TYPES: tuple[FeeType, ...] = (
    FeeType("ATM Fee", 3.50, "ATM Withdrawal Fee"),
    FeeType("Foreign Transaction Fee", 2.99, "Foreign Transaction"),
    FeeType("Monthly Service Fee", 12.00, "Monthly Account Fee"),
    FeeType("Overdraft Fee", 35.00, "Overdraft Protection"),
    FeeType("Wire Transfer Fee", 25.00, "Wire Transfer Fee"),
    FeeType("Paper Statement Fee", 2.00, "Paper Statement"),
    FeeType("Late Payment Fee", 29.00, "Late Payment Fee"),
    FeeType("Returned Item Fee", 15.00, "Returned Item"),
    FeeType("Card Replacement Fee", 5.00, "Card Replacement"),
    FeeType("Express Delivery Fee", 25.00, "Express Delivery"),
    FeeType("Out-of-Network ATM", 2.50, "Non-Network ATM"),
    FeeType("Stop Payment Fee", 30.00, "Stop Payment"),
)
