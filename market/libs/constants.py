from enum import Enum


class Hall(Enum):
    RK = "RK"
    RP = "RP"
    LBS = "LBS"
    AZAD = "AZAD"
    HJB = "HJB"
    MT = "MT"
    PATEL = "PATEL"
    VS = "VS"
    BCR = "BCR"
    SNVH = "SNVH"
    SNIG = "SNIG"
    ABV = "ABV"
    MMM = "MMM"
    BRH = "BRH"
    JCB = "JCB"
    GKH = "GKH"
    RLB = "RLB"
    NEHRU = "NEHRU"
    LLR = "LLR"
    SBP = "SBP"
    MS = "MS"
    ZH = "ZH"
    GOKHALE = "GOKHALE"
    VSRC = "VSRC"
    SAM = "SAM"
    OTHER = "OTHER"


class ProductCategory(Enum):
    ELECTRONICS = "ELECTRONICS"
    BOOKS = "BOOKS"
    STATIONERY = "STATIONERY"
    FURNITURE = "FURNITURE"
    HOUSEHOLD = "HOUSEHOLD"
    SPORTS = "SPORTS"
    CYCLE = "CYCLE"
    APPAREL = "APPAREL"
    TICKETS = "TICKETS"
    OTHER = "OTHER"


class ServiceCategory(Enum):
    ACADEMICS = "ACADEMICS"
    CAREERS = "CAREERS"
    COMPETITION = "COMPETITION"
    FREELANCING = "FREELANCING"
    DESIGN = "DESIGN"
    CODING = "CODING"
    VENDORS = "VENDORS"
    OTHER = "OTHER"


# Category value the listing pages send when no category is picked
ALL_CATEGORIES = "All Categories"

MIN_CONDITION = 1
MAX_CONDITION = 5
