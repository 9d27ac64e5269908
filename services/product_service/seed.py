"""Sample inventory inserted the first time the store starts empty."""

_IMAGE = "https://via.placeholder.com/150/{color}/ffffff?text={label}"

_ELECTRONICS = "0066cc"
_ACCESSORIES = "ff6600"
_OFFICE = "00cc66"
_STATIONERY = "cc00cc"

SAMPLE_PRODUCTS = [
    {"name": "Wireless Mouse", "description": "Ergonomic wireless mouse with USB receiver",
     "price": 29.99, "quantity": 45, "category": "Electronics",
     "image_url": _IMAGE.format(color=_ELECTRONICS, label="Mouse")},
    {"name": "Mechanical Keyboard", "description": "RGB backlit mechanical gaming keyboard",
     "price": 89.99, "quantity": 23, "category": "Electronics",
     "image_url": _IMAGE.format(color=_ELECTRONICS, label="Keyboard")},
    {"name": "USB-C Cable", "description": "High-speed USB-C charging cable 6ft",
     "price": 14.99, "quantity": 120, "category": "Accessories",
     "image_url": _IMAGE.format(color=_ACCESSORIES, label="Cable")},
    {"name": "Laptop Stand", "description": "Adjustable aluminum laptop stand",
     "price": 39.99, "quantity": 34, "category": "Accessories",
     "image_url": _IMAGE.format(color=_ACCESSORIES, label="Stand")},
    {"name": "Webcam HD", "description": "1080p HD webcam with built-in microphone",
     "price": 59.99, "quantity": 18, "category": "Electronics",
     "image_url": _IMAGE.format(color=_ELECTRONICS, label="Webcam")},
    {"name": "Desk Lamp", "description": "LED desk lamp with adjustable brightness",
     "price": 34.99, "quantity": 67, "category": "Office",
     "image_url": _IMAGE.format(color=_OFFICE, label="Lamp")},
    {"name": "Notebook Set", "description": "Set of 3 premium lined notebooks",
     "price": 19.99, "quantity": 89, "category": "Stationery",
     "image_url": _IMAGE.format(color=_STATIONERY, label="Notebooks")},
    {"name": "Pen Pack", "description": "Pack of 12 ballpoint pens",
     "price": 9.99, "quantity": 156, "category": "Stationery",
     "image_url": _IMAGE.format(color=_STATIONERY, label="Pens")},
    {"name": 'Monitor 24"', "description": "24-inch Full HD LED monitor",
     "price": 179.99, "quantity": 12, "category": "Electronics",
     "image_url": _IMAGE.format(color=_ELECTRONICS, label="Monitor")},
    {"name": "Headphones", "description": "Noise-cancelling over-ear headphones",
     "price": 129.99, "quantity": 28, "category": "Electronics",
     "image_url": _IMAGE.format(color=_ELECTRONICS, label="Headphones")},
    {"name": "Phone Stand", "description": "Adjustable phone holder for desk",
     "price": 15.99, "quantity": 73, "category": "Accessories",
     "image_url": _IMAGE.format(color=_ACCESSORIES, label="Phone+Stand")},
    {"name": "Mouse Pad", "description": "Large gaming mouse pad with smooth surface",
     "price": 19.99, "quantity": 91, "category": "Accessories",
     "image_url": _IMAGE.format(color=_ACCESSORIES, label="Mouse+Pad")},
    {"name": "Desk Organizer", "description": "Multi-compartment desk organizer",
     "price": 24.99, "quantity": 42, "category": "Office",
     "image_url": _IMAGE.format(color=_OFFICE, label="Organizer")},
    {"name": "Wireless Charger", "description": "Fast wireless charging pad",
     "price": 29.99, "quantity": 55, "category": "Electronics",
     "image_url": _IMAGE.format(color=_ELECTRONICS, label="Charger")},
    {"name": "Paper Clips Box", "description": "Box of 500 paper clips",
     "price": 5.99, "quantity": 203, "category": "Stationery",
     "image_url": _IMAGE.format(color=_STATIONERY, label="Clips")},
    {"name": "Stapler", "description": "Heavy-duty desktop stapler",
     "price": 12.99, "quantity": 64, "category": "Office",
     "image_url": _IMAGE.format(color=_OFFICE, label="Stapler")},
    {"name": "Bluetooth Speaker", "description": "Portable waterproof Bluetooth speaker",
     "price": 49.99, "quantity": 31, "category": "Electronics",
     "image_url": _IMAGE.format(color=_ELECTRONICS, label="Speaker")},
    {"name": "USB Hub", "description": "4-port USB 3.0 hub",
     "price": 22.99, "quantity": 47, "category": "Accessories",
     "image_url": _IMAGE.format(color=_ACCESSORIES, label="USB+Hub")},
    {"name": "Sticky Notes", "description": "Colorful sticky notes pack of 6",
     "price": 8.99, "quantity": 137, "category": "Stationery",
     "image_url": _IMAGE.format(color=_STATIONERY, label="Notes")},
    {"name": "Cable Management", "description": "Cable organizer clips set of 20",
     "price": 11.99, "quantity": 82, "category": "Accessories",
     "image_url": _IMAGE.format(color=_ACCESSORIES, label="Cable+Mgmt")},
]
