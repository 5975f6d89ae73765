import logging

from be.model.schema import NewBook, NewOrder, NewReview, NewUser

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

AVAILABLE_BOOKS = [
    {
        "title": "微積分概論 第五版",
        "author": "Stewart",
        "subject": "理工科學",
        "price": 450,
        "condition": "八成新",
        "description": "書況良好，有少量筆記，不影響閱讀。含習題解答。",
        "image_url": "https://images.unsplash.com/photo-1553062407-98eeb64c6a62?w=300&h=400&fit=crop",
        "seller": "demo_seller",
    },
    {
        "title": "經濟學原理",
        "author": "Mankiw",
        "subject": "商業管理",
        "price": 380,
        "condition": "九成新",
        "description": "幾乎全新，只翻閱過幾次。",
        "image_url": "https://images.unsplash.com/photo-1557821552-17105176677c?w=300&h=400&fit=crop",
        "seller": "demo_seller",
    },
    {
        "title": "英文寫作指南",
        "author": "William Strunk",
        "subject": "語言學習",
        "price": 150,
        "condition": "七成新",
        "description": "有一些折痕但內容完整。",
        "image_url": "https://images.unsplash.com/photo-1456513080510-7bf3a84b82f8?w=300&h=400&fit=crop",
        "seller": "demo_buyer",
    },
    {
        "title": "程式設計入門 - Python",
        "author": "John Zelle",
        "subject": "理工科學",
        "price": 520,
        "condition": "全新",
        "description": "全新未拆封，買錯版本所以出售。",
        "image_url": "https://images.unsplash.com/photo-1517694712202-14dd9538aa97?w=300&h=400&fit=crop",
        "seller": "demo_seller",
    },
    {
        "title": "心理學導論",
        "author": "Philip Zimbardo",
        "subject": "人文社會",
        "price": 280,
        "condition": "八成新",
        "description": "書況佳，適合心理系必修課使用。",
        "image_url": "https://images.unsplash.com/photo-1512820790803-83ca734da794?w=300&h=400&fit=crop",
        "seller": "demo_buyer",
    },
    {
        "title": "法學緒論",
        "author": "鄭玉波",
        "subject": "法律政治",
        "price": 350,
        "condition": "九成新",
        "description": "法律系必備教材，修訂二十五版，僅使用一學期。由黃宗樂、楊宏暉修訂。",
        "image_url": "/attached_assets/法學緒論.webp",
        "seller": "demo_seller",
    },
]

# each sold book comes with the completed order and the review left on it
SOLD_BOOKS = [
    {
        "book": {
            "title": "線性代數",
            "author": "Gilbert Strang",
            "subject": "理工科學",
            "price": 400,
            "condition": "八成新",
            "description": "MIT 經典教材，已售出。",
            "image_url": "https://images.unsplash.com/photo-1635070041078-e363dbe005cb?w=300&h=400&fit=crop",
        },
        "seller": "demo_seller",
        "buyer": "demo_buyer",
        "message": "書況很好，謝謝！",
        "rating": 5,
        "comment": "賣家很親切，書況跟描述一樣好，推薦！",
    },
    {
        "book": {
            "title": "會計學原理",
            "author": "Warren",
            "subject": "商業管理",
            "price": 320,
            "condition": "九成新",
            "description": "商學院必修，已售出。",
            "image_url": "https://images.unsplash.com/photo-1554224155-6726b3ff858f?w=300&h=400&fit=crop",
        },
        "seller": "demo_buyer",
        "buyer": "demo_seller",
        "message": "很棒的交易體驗",
        "rating": 4,
        "comment": "書的狀況不錯，出貨速度快。",
    },
    {
        "book": {
            "title": "有機化學",
            "author": "Clayden",
            "subject": "理工科學",
            "price": 550,
            "condition": "七成新",
            "description": "化學系經典教材，已售出。",
            "image_url": "https://images.unsplash.com/photo-1532187863486-abf9dbad1b69?w=300&h=400&fit=crop",
        },
        "seller": "demo_seller",
        "buyer": "demo_buyer",
        "message": "快速出貨",
        "rating": 5,
        "comment": "非常好的賣家，強烈推薦！",
    },
]


def seed_sample_data(storage) -> None:
    """Fill ``storage`` with the demo marketplace through its create operations."""
    users = {}
    users["demo_seller"] = storage.create_user(
        NewUser(
            username="demo_seller",
            password=DEMO_PASSWORD,
            email="seller@school.edu.tw",
            phone="0912-345-678",
            school="國立台灣大學",
        )
    )
    users["demo_buyer"] = storage.create_user(
        NewUser(
            username="demo_buyer",
            password=DEMO_PASSWORD,
            email="buyer@school.edu.tw",
            phone="0923-456-789",
            school="國立清華大學",
        )
    )

    for entry in AVAILABLE_BOOKS:
        fields = dict(entry)
        seller = users[fields.pop("seller")]
        storage.create_book(NewBook(**fields, seller_id=seller.id, status="available"))

    sold = []
    for entry in SOLD_BOOKS:
        seller = users[entry["seller"]]
        book = storage.create_book(NewBook(**entry["book"], seller_id=seller.id, status="sold"))
        sold.append((entry, book))

    orders = []
    for entry, book in sold:
        order = storage.create_order(
            NewOrder(
                book_id=book.id,
                buyer_id=users[entry["buyer"]].id,
                seller_id=users[entry["seller"]].id,
                status="completed",
                message=entry["message"],
            )
        )
        orders.append((entry, order))

    for entry, order in orders:
        storage.create_review(
            NewReview(
                seller_id=order.seller_id,
                buyer_id=order.buyer_id,
                order_id=order.id,
                rating=entry["rating"],
                comment=entry["comment"],
            )
        )
    logger.info(
        "seeded %d users, %d books, %d orders, %d reviews",
        len(users),
        len(AVAILABLE_BOOKS) + len(SOLD_BOOKS),
        len(orders),
        len(orders),
    )
