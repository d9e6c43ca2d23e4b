#!/usr/bin/env python3
"""
Stop-word Cleaning and Language Guessing Demo

This script demonstrates stop-word removal for a known language, language
guessing by stop-word frequency, and how ties and unsupported languages
are handled.
"""

from qustop.clean import StopwordCleaner, get_filter_stats


def demo_language_guessing():
    """Demonstrate guessing the language of short texts."""
    print("=" * 60)
    print("LANGUAGE GUESSING DEMO")
    print("=" * 60)

    cleaner = StopwordCleaner()
    candidates = ["en", "es", "fr", "de", "it", "pt", "ru"]

    sample_texts = {
        'English': "This is a short test of the guesser. It should find the English stop words in it.",
        'Spanish': "Este es un texto de muestra en español y el sistema debe encontrar las palabras vacías.",
        'French': "Ceci est un exemple de texte en français pour tester le système avec les mots vides.",
        'German': "Dies ist ein Beispieltext auf Deutsch, und er hat mehrere Sätze mit den Stoppwörtern.",
        'Italian': "Questo è un testo di esempio in italiano per il sistema che deve trovare le parole.",
        'Portuguese': "Este é um texto de amostra em português para o sistema que deve encontrar as palavras.",
        'Russian': "Это образец текста на русском языке, и он содержит несколько предложений для проверки.",
    }

    for language_name, text in sample_texts.items():
        result = cleaner.guess_language(text, candidates)

        print(f"\n{language_name} Text:")
        print(f"Text: {text[:70]}...")
        print(f"Guessed Languages: {', '.join(result.languages) or 'none'}")
        print(f"Stop Words: {result.max_count}/{result.total_count}")
        print(f"Cleaned: {result.cleaned_text[:70]}")


def demo_ties_and_unknown_text():
    """Demonstrate ties between candidates and text with no stop words."""
    print("\n" + "=" * 60)
    print("TIES AND UNKNOWN TEXT DEMO")
    print("=" * 60)

    cleaner = StopwordCleaner()

    for candidates in (["en", "fr"], ["fr", "en"]):
        result = cleaner.guess_language("the le", candidates)
        print(f"\nCandidates {candidates}: winners {result.languages}, "
              f"cleaned with {result.language}: {result.cleaned_text!r}")

    result = cleaner.guess_language("Zxq vrrp klm", ["en", "fr"])
    print(f"\nNo stop words: confident={result.is_confident}, text={result.cleaned_text!r}")


def demo_cleaning():
    """Demonstrate cleaning text in a known language."""
    print("\n" + "=" * 60)
    print("STOP-WORD CLEANING DEMO")
    print("=" * 60)

    cleaner = StopwordCleaner()

    test_cases = [
        ("en-US", "The quick brown fox jumps over the lazy dog", False),
        ("fr-CA", "<p>Le chat &amp; la souris sont dans la maison.</p>", True),
        ("deu", "Der Hund und die Katze spielen im Garten.", False),
        ("xx", "Unsupported   languages pass   through.", False),
    ]

    for tag, text, html in test_cases:
        print(f"\n[{tag}] {text}")
        print(f"  -> {cleaner.clean(text, tag, strip_markup=html)!r}")

    texts = [text for _, text, _ in test_cases[:1]] + ["A dog and a cat", "Nothing special here"]
    results = [cleaner.filter_count(text, "en") for text in texts]
    print("\nBatch statistics (en):")
    for key, value in get_filter_stats(results).items():
        print(f"  {key}: {value}")

    cleaner.set_include_digits(True)
    print(f"\nWith digits: {cleaner.clean('The 3 little pigs', 'en')!r}")


def main():
    """Run all demos."""
    print("QuStop Stop-word Cleaning and Language Guessing Demo")
    print("This demo shows stop-word removal and stop-word based language guessing.")

    try:
        demo_language_guessing()
        demo_ties_and_unknown_text()
        demo_cleaning()

        print("\n" + "=" * 60)
        print("DEMO COMPLETED SUCCESSFULLY")
        print("=" * 60)

    except Exception as e:
        print(f"\nError running demo: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
