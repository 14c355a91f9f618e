from shared.products import Product

# Demo catalog loaded at startup. Ids are strings, as the cart expects.
SAMPLE_PRODUCTS = [
    Product(
        id="1",
        name="Organic Apples",
        price=3.99,
        description="Crisp organic apples, sold per bag",
        image="https://placehold.co/300x200.png",
        data_ai_hint="apples fruit",
        category="fruits",
        in_stock=True,
        discount=10,
    ),
    Product(
        id="2",
        name="Whole Wheat Bread",
        price=2.49,
        description="Freshly baked whole wheat loaf",
        image="https://placehold.co/300x200.png",
        data_ai_hint="bread loaf",
        category="bakery",
        in_stock=True,
        discount=5,
    ),
    Product(
        id="3",
        name="Free-Range Eggs",
        price=4.29,
        description="A dozen free-range eggs",
        image="https://placehold.co/300x200.png",
        data_ai_hint="eggs carton",
        category="dairy",
        in_stock=True,
        discount=0,
    ),
    Product(
        id="4",
        name="Organic Spinach",
        price=2.99,
        description="Baby spinach leaves, washed and ready",
        image="https://placehold.co/300x200.png",
        data_ai_hint="spinach leaves",
        category="vegetables",
        in_stock=True,
        discount=20,
    ),
    Product(
        id="5",
        name="Greek Yogurt",
        price=5.49,
        description="Plain strained Greek yogurt",
        image="https://placehold.co/300x200.png",
        data_ai_hint="yogurt tub",
        category="dairy",
        in_stock=False,
        discount=0,
    ),
    Product(
        id="6",
        name="Chicken Breast",
        price=8.99,
        description="Boneless skinless chicken breast",
        image="https://placehold.co/300x200.png",
        data_ai_hint="chicken meat",
        category="meat",
        in_stock=True,
        discount=25,
    ),
    Product(
        id="7",
        name="Brown Rice",
        price=3.49,
        description="Long grain brown rice, 1kg",
        image="https://placehold.co/300x200.png",
        data_ai_hint="rice grains",
        category="grains",
        in_stock=True,
        discount=0,
    ),
    Product(
        id="8",
        name="Bananas",
        price=1.99,
        description="Ripe yellow bananas",
        image="https://placehold.co/300x200.png",
        data_ai_hint="banana bunch",
        category="fruits",
        in_stock=True,
        discount=0,
    ),
]
