from fancyhangman.lang.normalize import AppLanguage, parse_app_language, replace_umlauts, replace_unicode

def test_replace_unicode_german():
    assert replace_unicode("schön", AppLanguage.DE) == "schoen"
    assert replace_unicode("geschoß", AppLanguage.DE) == "geschoss"
    assert replace_unicode("zäh", AppLanguage.DE) == "zaeh"
    assert replace_unicode("lüge", AppLanguage.DE) == "luege"

def test_replace_unicode_english():
    assert replace_unicode("schön", AppLanguage.EN) == "schon"
    assert replace_unicode("geschoß", AppLanguage.EN) == "geschoss"
    assert replace_unicode("zäh", AppLanguage.EN) == "zah"
    assert replace_unicode("lüge", AppLanguage.EN) == "luge"

def test_replace_unicode_strips_other_diacritics():
    assert replace_unicode("crème", AppLanguage.DE) == "creme"
    assert replace_unicode("façade", AppLanguage.EN) == "facade"
    assert replace_unicode("łódź", AppLanguage.EN) == "lodz"
    assert replace_unicode("apple", AppLanguage.DE) == "apple"

def test_replace_unicode_does_not_fold_case():
    assert replace_unicode("Äpfel", AppLanguage.DE) == "Apfel"

def test_replace_umlauts():
    assert replace_umlauts("schön") == "schoen"
    assert replace_umlauts("zäh") == "zaeh"
    assert replace_umlauts("lüge") == "luege"
    assert replace_umlauts("geschoß") == "geschoß"

def test_parse_app_language():
    assert parse_app_language("de") == AppLanguage.DE
    assert parse_app_language("DE") == AppLanguage.DE
    assert parse_app_language("en") == AppLanguage.EN
    assert parse_app_language("") == AppLanguage.EN
    assert parse_app_language(None) == AppLanguage.EN
    assert parse_app_language("fr") == AppLanguage.EN

def test_replace_unicode_keeps_letters_without_decomposition():
    assert replace_unicode("ħobża", AppLanguage.EN) == "hobza"
    assert replace_unicode("straŋe", AppLanguage.EN) == "strange"
    assert replace_unicode("слово", AppLanguage.EN) == "slovo"
    assert replace_unicode("слово", AppLanguage.DE) == "slovo"
