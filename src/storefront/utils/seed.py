"""Demo catalogue, accounts and carts for a fresh database."""

from storefront.domain import logger

# All demo accounts sign in with this password
DEMO_PASSWORD = "password123"

CATEGORIES = [
    ("Electronics", "Electronic devices and gadgets"),
    ("Clothing", "Apparel and fashion items"),
    ("Home & Kitchen", "Home decor and kitchen appliances"),
    ("Books", "Books and literature"),
    ("Sports & Outdoors", "Sporting goods and outdoor equipment"),
]

USERS = [
    ("Admin User", "admin", "admin@example.com", "admin"),
    ("John Doe", "johndoe", "john@example.com", "customer"),
    ("Jane Smith", "janesmith", "jane@example.com", "customer"),
    ("Bob Johnson", "bobjohnson", "bob@example.com", "customer"),
]

# (category, name, description, price, stock, image)
PRODUCTS = [
    ("Electronics", "Smartphone X", "Latest smartphone with advanced features", 699.99, 50, "smartphone.jpg"),
    ("Electronics", "Wireless Headphones", "Premium noise-cancelling headphones", 149.99, 100, "headphones.jpg"),
    ("Electronics", "Laptop Pro", "High-performance laptop for professionals", 1299.99, 25, "laptop.jpg"),
    ("Electronics", "Smart Watch", "Fitness tracking and notifications", 199.99, 75, "smartwatch.jpg"),
    ("Electronics", "Bluetooth Speaker", "Portable speaker with crisp sound", 79.99, 120, "speaker.jpg"),
    ("Clothing", "Men's T-Shirt", "Comfortable cotton t-shirt", 19.99, 200, "tshirt.jpg"),
    ("Clothing", "Women's Jeans", "Classic fit denim jeans", 49.99, 150, "jeans.jpg"),
    ("Clothing", "Winter Jacket", "Warm winter coat with hood", 89.99, 50, "jacket.jpg"),
    ("Clothing", "Running Shoes", "Lightweight shoes for runners", 79.99, 100, "shoes.jpg"),
    ("Clothing", "Sun Hat", "Wide-brimmed sun protection hat", 24.99, 80, "hat.jpg"),
    ("Home & Kitchen", "Coffee Maker", "Programmable coffee brewing system", 69.99, 60, "coffeemaker.jpg"),
    ("Home & Kitchen", "Blender", "High-speed blender for smoothies", 49.99, 40, "blender.jpg"),
    ("Home & Kitchen", "Throw Pillow Set", "Decorative pillows for couch or bed", 29.99, 100, "pillows.jpg"),
    ("Home & Kitchen", "Kitchen Knife Set", "Professional grade kitchen knives", 99.99, 30, "knives.jpg"),
    ("Home & Kitchen", "Bedding Set", "Luxury bedding with duvet cover", 89.99, 45, "bedding.jpg"),
    ("Books", "The Great Novel", "Bestselling fiction book", 14.99, 200, "novel.jpg"),
    ("Books", "Cookbook Collection", "Recipe collection from top chefs", 24.99, 75, "cookbook.jpg"),
    ("Books", "History of the World", "Comprehensive world history", 19.99, 60, "history.jpg"),
    ("Books", "Science for Beginners", "Introduction to scientific concepts", 12.99, 90, "science.jpg"),
    ("Books", "Business Strategy", "Guide to business success", 17.99, 70, "business.jpg"),
    ("Sports & Outdoors", "Yoga Mat", "Non-slip exercise mat", 24.99, 120, "yogamat.jpg"),
    ("Sports & Outdoors", "Tennis Racket", "Professional tennis racket", 79.99, 40, "tennis.jpg"),
    ("Sports & Outdoors", "Camping Tent", "4-person weather-resistant tent", 129.99, 30, "tent.jpg"),
    ("Sports & Outdoors", "Basketball", "Official size and weight", 29.99, 80, "basketball.jpg"),
    ("Sports & Outdoors", "Hiking Backpack", "Durable backpack for outdoor adventures", 59.99, 55, "backpack.jpg"),
]

# username -> [(product name, quantity)]
CARTS = {
    "johndoe": [("Smartphone X", 1), ("Wireless Headphones", 1)],
    "janesmith": [("Men's T-Shirt", 2), ("Coffee Maker", 1)],
    "bobjohnson": [],
}


def seed_db(domain) -> dict[str, int]:
    """Load the demo data unless the catalogue already holds categories.

    Must be called inside an active domain context.
    """
    from storefront.catalogue.category.category import Category
    from storefront.catalogue.product.product import Product
    from storefront.identity.user.user import User
    from storefront.ordering.cart.cart import Cart

    category_repo = domain.repository_for(Category)
    if category_repo.count():
        logger.info("seed_skipped", reason="catalogue not empty")
        return {}

    categories = {
        name: category_repo.create(name=name, description=description) for name, description in CATEGORIES
    }

    user_repo = domain.repository_for(User)
    users = {
        username: user_repo.create(name=name, username=username, email=email, password=DEMO_PASSWORD, role=role)
        for name, username, email, role in USERS
    }

    product_repo = domain.repository_for(Product)
    products = {
        name: product_repo.create(
            name=name,
            description=description,
            price=price,
            stock=stock,
            image_url=f"/images/products/{image}",
            category_id=categories[category].id,
        )
        for category, name, description, price, stock, image in PRODUCTS
    }

    cart_repo = domain.repository_for(Cart)
    for username, items in CARTS.items():
        cart = cart_repo.get_or_create(users[username].id)
        for product_name, quantity in items:
            cart_repo.add_item(cart.id, products[product_name].id, quantity)

    counts = {
        "categories": len(categories),
        "users": len(users),
        "products": len(products),
        "carts": len(CARTS),
    }
    logger.info("seed_complete", **counts)
    return counts
