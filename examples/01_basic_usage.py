"""
Basic Usage Example for Mushaf

This example demonstrates the simplest way to use Mushaf:
1. Load the corpus
2. Resolve ayahs, a juz and a page
3. Handle a rejected address
"""

from mushaf import QueryResolver, load_corpus


def main():
    corpus_path = "data/quran_v2.json"

    # Step 1: Load and validate the corpus once
    print("Step 1: Loading corpus...")
    store = load_corpus(corpus_path)
    print(f"  Loaded {len(store)} surahs, {store.verse_count} ayahs\n")

    resolver = QueryResolver(store)

    # Step 2: Resolve addresses
    print("Step 2: Resolving addresses...")
    ayah = resolver.get_ayah_by_key("2:255").unwrap()
    print(f"  {ayah.surah.name} {ayah.number} (page {ayah.page}, juz {ayah.juz})")

    juz = resolver.get_juz(30).unwrap()
    print(f"  Juz 30 holds {juz.count} ayahs")

    page = resolver.get_page(604).unwrap()
    print(f"  Page 604 holds {page.count} ayahs\n")

    # Step 3: Errors come back as values
    print("Step 3: Rejected addresses...")
    for key in ("115:1", "1:1:1"):
        result = resolver.get_ayah_by_key(key)
        print(f"  {key!r}: {type(result.error).__name__} - {result.error.message}")


if __name__ == "__main__":
    main()
