"""
Demo listings used by the seed command.

Owners are referenced by email and created on the fly.
"""

USERS = [
    {"email": "arjun.sharma@iitkgp.ac.in", "name": "Arjun Sharma"},
    {"email": "priya.patel@iitkgp.ac.in", "name": "Priya Patel"},
    {"email": "rohit.kumar@iitkgp.ac.in", "name": "Rohit Kumar"},
    {"email": "rahul.verma@iitkgp.ac.in", "name": "Rahul Verma"},
]

PRODUCTS = [
    {
        "owner": "arjun.sharma@iitkgp.ac.in",
        "title": "iPhone 13 Pro Max 256GB",
        "description": "Excellent condition with all accessories. Battery health 89%.",
        "price": 75000,
        "original_price": 85000,
        "condition": 4,
        "category": "ELECTRONICS",
        "address_hall": "RK",
        "product_type": "USED",
    },
    {
        "owner": "priya.patel@iitkgp.ac.in",
        "title": "Study Table with Chair",
        "description": "Wooden study table with comfortable chair. Perfect for a hostel room.",
        "price": 3500,
        "condition": 3,
        "category": "FURNITURE",
        "address_hall": "AZAD",
        "product_type": "USED",
    },
    {
        "owner": "rohit.kumar@iitkgp.ac.in",
        "title": "Engineering Textbooks Bundle",
        "description": "Complete set of 2nd year engineering books with minimal highlighting.",
        "price": 2500,
        "original_price": 4000,
        "condition": 4,
        "category": "BOOKS",
        "address_hall": "PATEL",
        "product_type": "USED",
    },
    {
        "owner": "arjun.sharma@iitkgp.ac.in",
        "title": "Bicycle - Hero Ranger",
        "description": "Mountain bike used for campus commuting. Recently serviced.",
        "price": 8500,
        "original_price": 12000,
        "condition": 4,
        "category": "CYCLE",
        "address_hall": "GOKHALE",
        "product_type": "USED",
    },
    {
        "owner": "priya.patel@iitkgp.ac.in",
        "title": "Desk Lamp",
        "description": "LED desk lamp with three brightness levels.",
        "price": 600,
        "condition": 5,
        "category": "HOUSEHOLD",
        "address_hall": "AZAD",
        "product_type": "NEW",
    },
]

SERVICES = [
    {
        "owner": "rahul.verma@iitkgp.ac.in",
        "title": "Mathematics Tutoring",
        "description": "Advanced Mathematics, Calculus and Linear Algebra.",
        "min_price": 300,
        "max_price": 500,
        "category": "ACADEMICS",
        "experience": "3+ years",
        "address_hall": "NEHRU",
    },
    {
        "owner": "rohit.kumar@iitkgp.ac.in",
        "title": "Resume Review",
        "description": "Placement season resume and cover letter review.",
        "min_price": 200,
        "max_price": 200,
        "category": "CAREERS",
        "experience": "1 year",
        "address_hall": "PATEL",
    },
]

DEMANDS = [
    {
        "owner": "arjun.sharma@iitkgp.ac.in",
        "title": "Looking for a scientific calculator",
        "description": "Casio fx-991 or similar, needed before end sems.",
        "product_category": "STATIONERY",
    },
    {
        "owner": "priya.patel@iitkgp.ac.in",
        "title": "Need a poster designer",
        "description": "Poster for the hall cultural night.",
        "service_category": "DESIGN",
    },
]
