"""
Тести для модуля nlp

Запуск: pytest tests/test_nlp.py -v
"""


def test_keyword_filter():
    """Тест фільтра ключових слів"""
    from apsa.nlp import is_symptom_phrase, is_suggestible

    assert is_symptom_phrase("sore throat")
    assert is_symptom_phrase("feeling dizzy")
    assert is_symptom_phrase("shortness of breath when walking")
    assert not is_symptom_phrase("mild")
    assert not is_symptom_phrase("runny nose")

    assert is_suggestible("runny nose")
    assert is_suggestible("neck stiffness")
    assert not is_suggestible("swollen glands")


def test_split_phrases():
    """Тест розбиття на фрази"""
    from apsa.nlp import FreeTextExtractor

    extractor = FreeTextExtractor()

    assert extractor.split_phrases("Fever, ; cough\n\n Headache ") == ["fever", "cough", "headache"]
    assert extractor.split_phrases("") == []


def test_extract_keeps_symptom_phrases():
    """Тест: залишаються тільки фрази з ключовими словами"""
    from apsa.nlp import FreeTextExtractor

    phrases = FreeTextExtractor().extract("Sore throat, mild; fever since Monday\nfeeling tired")

    assert phrases == ["sore throat", "fever since monday", "feeling tired"]
    assert "mild" not in phrases


def test_extract_whole_sentence():
    """Тест: речення без розділювачів — одна фраза"""
    from apsa.nlp import FreeTextExtractor

    phrases = FreeTextExtractor().extract("I have a sore throat and a mild fever")

    assert phrases == ["i have a sore throat and a mild fever"]


def test_extract_deduplicates_and_tolerates_bad_input():
    """Тест дублікатів і некоректного вводу"""
    from apsa.nlp import FreeTextExtractor

    extractor = FreeTextExtractor()

    assert extractor.extract("cough, Cough, cough") == ["cough"]
    assert extractor.extract("") == []
    assert extractor.extract(None) == []
    assert extractor.extract("hello, thanks") == []
