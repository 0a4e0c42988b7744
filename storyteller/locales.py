"""Supported locales and the language names handed to the model."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List

logger = logging.getLogger(__name__)


class Locale(str, Enum):
    EN = "en"
    KO = "ko"
    JA = "ja"
    ZH = "zh"
    RU = "ru"
    FR = "fr"
    AR = "ar"
    HE = "he"
    FA = "fa"


LANGUAGE_NAMES: Dict[Locale, str] = {
    Locale.EN: "English",
    Locale.KO: "Korean",
    Locale.JA: "Japanese",
    Locale.ZH: "Chinese",
    Locale.RU: "Russian",
    Locale.FR: "French",
    Locale.AR: "Arabic",
    Locale.HE: "Hebrew",
    Locale.FA: "Persian",
}

RTL_LOCALES = frozenset({Locale.AR, Locale.HE, Locale.FA})

ERROR_MESSAGES: Dict[Locale, str] = {
    Locale.EN: "Something went wrong while creating your story. Please try again.",
    Locale.KO: "스토리를 만드는 중 오류가 발생했습니다. 다시 시도해 주세요.",
    Locale.JA: "ストーリーの作成中にエラーが発生しました。もう一度お試しください。",
    Locale.ZH: "生成故事时出错，请重试。",
    Locale.RU: "Не удалось создать историю. Пожалуйста, попробуйте ещё раз.",
    Locale.FR: "Une erreur est survenue lors de la création de votre histoire. Veuillez réessayer.",
    Locale.AR: "حدث خطأ أثناء إنشاء قصتك. يرجى المحاولة مرة أخرى.",
    Locale.HE: "אירעה שגיאה ביצירת הסיפור שלך. נסו שוב.",
    Locale.FA: "هنگام ساخت داستان شما خطایی رخ داد. لطفاً دوباره تلاش کنید.",
}


def resolve_locale(value: str | Locale | None) -> Locale:
    """Map a locale code to ``Locale``, falling back to English."""
    if isinstance(value, Locale):
        return value
    code = (value or "").strip().lower()
    try:
        return Locale(code)
    except ValueError:
        logger.warning("Unsupported locale %r; using English", value)
        return Locale.EN


def language_name(locale: str | Locale) -> str:
    return LANGUAGE_NAMES[resolve_locale(locale)]


def is_rtl(locale: str | Locale) -> bool:
    return resolve_locale(locale) in RTL_LOCALES


def error_message(locale: str | Locale) -> str:
    return ERROR_MESSAGES[resolve_locale(locale)]


def list_locales() -> List[Dict[str, object]]:
    return [
        {"code": loc.value, "name": LANGUAGE_NAMES[loc], "rtl": loc in RTL_LOCALES}
        for loc in Locale
    ]
