"""Sample dishes used to pre-populate a fresh catalog."""

from typing import Any

INITIAL_DISHES: list[dict[str, Any]] = [
    {
        "id": "2",
        "name": "Full English Breakfast",
        "description": "Classic Full English breakfast with eggs, bacon, sausages, and beans",
        "course": "Breakfast",
        "price": "85.00",
        "image": "https://plus.unsplash.com/premium_photo-1663840225558-03ac41c68873?w=800&auto=format&fit=crop&q=60",
    },
    {
        "id": "1",
        "name": "Caesar Salad",
        "description": "Fresh romaine lettuce with parmesan, croutons and Caesar dressing",
        "course": "Lunch",
        "price": "75.00",
        "image": "https://images.unsplash.com/photo-1670237735381-ac5c7fa72c51?w=800&auto=format&fit=crop&q=60",
    },
    {
        "id": "3",
        "name": "Beef Steak",
        "description": "Prime ribeye steak with garlic butter and roasted vegetables",
        "course": "Dinner",
        "price": "225.00",
        "image": "https://images.unsplash.com/photo-1608877907149-a206d75ba011?w=800&auto=format&fit=crop&q=60",
    },
]
