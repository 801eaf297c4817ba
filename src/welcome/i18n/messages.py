"""
Internationalization Messages

UI text in multiple languages for frontend display.
"""

RESOURCES = {
    "en": {
        "welcome_message": "Welcome to my website !",
        "change_language": "Change Language",
    },
    "hi": {
        "welcome_message": "मेरी वेबसाइट पर आपका स्वागत है !",
        "change_language": "भाषा बदलें",
    },
}

# Shown untranslated next to each language switch
LANGUAGE_NAMES = {
    "en": "English",
    "hi": "हिन्दी",
}
