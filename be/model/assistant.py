"""Rule-based chat helper for book detail pages.

A buyer's question is matched against keyword groups in a fixed order and
answered with one canned reply from the first matching group.
"""
import logging
import random

logger = logging.getLogger(__name__)

REPLIES = {
    "price": [
        "這個價格很實在，適合學生入手。",
        "價格還不錯，有興趣的話可以再跟賣家聊聊看。",
        "以目前市場行情來看，這個價位是合理的。",
        "考量書況與稀有程度，這價格算是划算的。",
        "如果覺得偏高，也可以嘗試議價看看喔！",
        "這價格比新書便宜很多，是不錯的選擇。",
        "看起來是個合理的起跳價，建議先詢問細節。",
        "有些賣家願意議價，可以試著談談看！",
    ],
    "condition": [
        "書況良好的話，讀起來不會有太大影響。",
        "這本書若只有輕微使用痕跡，還是非常值得考慮的。",
        "你可以再問問賣家是否有畫記或破損，確保品質。",
        "如果書況接近全新，那就很值得入手了！",
        "建議詢問是否有缺頁或污損，以免影響使用。",
        "若是常用科目的書，有些折舊是可以接受的。",
        "翻舊一點沒關係，只要內容完整就很好用。",
        "賣家通常會如實說明書況，可以再請對方補圖。",
    ],
    "shipping": [
        "建議先詢問賣家提供哪些寄送方式及運費細節。",
        "部分賣家會提供面交或超取，可以視情況討論。",
        "如果趕時間，可以請賣家提供最快的出貨方式。",
        "記得確認是否含運費，避免額外支出。",
        "若是同校，可以考慮面交省運費。",
        "有些賣家願意吸收運費，可以多問問。",
        "如果想寄到校內宿舍，也可以詢問是否方便。",
        "超商取貨是常見選項，也滿方便的喔！",
    ],
    "contact": [
        "你可以透過平台留言聯絡賣家喔！",
        "建議先聊聊，確認書況與交易方式再下單。",
        "如果你對這本書有興趣，可以主動發訊息給賣家看看。",
        "多詢問幾句也好，有時候還能談到好價格。",
        "和賣家確認清楚內容與版本，才不會買錯書。",
        "可以先自我介紹一下，再進一步詢問書籍細節。",
        "問問賣家是否還有其他書也想出清，順便買一買。",
        "如果平台有聊天功能，直接私訊最快最方便！",
    ],
    "payment": [
        "付款方式通常會由賣家決定，可以先詢問清楚。",
        "有些賣家接受轉帳、面交付現或行動支付。",
        "平台如果有第三方支付，會更有保障喔。",
        "建議在確認書況後再進行付款，以保障雙方權益。",
        "最好避免先匯款給不熟的對象，可請對方提供證明。",
    ],
    "edition": [
        "可以詢問書籍是第幾版，是否為最新版本。",
        "不同版本的內容可能會有差異，建議確認清楚。",
        "舊版通常價格較便宜，仍可參考使用。",
        "若是指定教科書，建議確認老師要求哪一版。",
        "有時第幾版差不多，重點在是否附有重點或解答。",
    ],
    "course": [
        "這本書常被用在經濟系／管理學等相關課程。",
        "你可以問問賣家是修哪一門課時用的，會更清楚。",
        "確認這本是否符合你所修的課程需求再購買。",
        "有些書雖然名稱相似，但內容可能不完全一致。",
        "如有疑問，也可以直接詢問老師或學長姐。",
    ],
}

# checked in order, first hit wins
KEYWORDS = [
    ("price", ("價", "价", "多少錢", "price")),
    ("condition", ("狀況", "状况", "新舊", "condition")),
    ("shipping", ("運", "运", "寄", "ship")),
    ("contact", ("聯", "联", "問", "contact")),
    ("payment", ("付", "款", "pay")),
    ("edition", ("版", "edition")),
    ("course", ("課", "课", "course")),
]

DEFAULT_REPLIES = [
    "《{title}》是一本很受歡迎的教科書。有什麼其他問題我可以幫忙嗎？",
    "這是關於{title}的詢問。建議你直接聯繫賣家詢問詳細信息。",
    "我了解你對這本書感興趣。如有需要，可以通過平台聯繫賣家。",
]


class AssistantError(Exception):
    pass


def classify(message: str):
    lowered = message.lower()
    for category, words in KEYWORDS:
        if any(w in lowered for w in words):
            return category
    return None


def generate_chat_response(book_info: dict, seller_info: dict, user_message: str, rng=random) -> str:
    try:
        title = book_info.get("title", "")
        category = classify(user_message)
        if category is None:
            return rng.choice(DEFAULT_REPLIES).format(title=title)
        reply = rng.choice(REPLIES[category])
        if category == "price":
            return "關於《{}》：{}".format(title, reply)
        return reply
    except Exception as e:
        logger.error("chat helper failed: %s", e)
        raise AssistantError("AI 本地服務運行出錯") from e


def suggest_for_search(query: str, books) -> str:
    """One-line hint for a search box; ``books`` have ``title`` and ``author``."""
    titles = [b["title"] for b in books]
    if not titles:
        return ""
    needle = (query or "").lower()
    for title in titles:
        if needle in title.lower():
            return "找到相關書籍：{}".format(title)
    return "我們有 {} 本書籍。試試看 {}？".format(len(titles), titles[0])
