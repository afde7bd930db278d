"""Static kana groups available for drilling."""

# Groups are addressed by their index in this list
KANA_GROUPS = [
    # Hiragana
    {'name': 'Hiragana あ', 'kana': list('あいうえお'), 'romaji': 'a i u e o'.split()},
    {'name': 'Hiragana か', 'kana': list('かきくけこ'), 'romaji': 'ka ki ku ke ko'.split()},
    {'name': 'Hiragana さ', 'kana': list('さしすせそ'), 'romaji': 'sa shi su se so'.split()},
    {'name': 'Hiragana た', 'kana': list('たちつてと'), 'romaji': 'ta chi tsu te to'.split()},
    {'name': 'Hiragana な', 'kana': list('なにぬねの'), 'romaji': 'na ni nu ne no'.split()},
    {'name': 'Hiragana は', 'kana': list('はひふへほ'), 'romaji': 'ha hi fu he ho'.split()},
    {'name': 'Hiragana ま', 'kana': list('まみむめも'), 'romaji': 'ma mi mu me mo'.split()},
    {'name': 'Hiragana や', 'kana': list('やゆよ'), 'romaji': 'ya yu yo'.split()},
    {'name': 'Hiragana ら', 'kana': list('らりるれろ'), 'romaji': 'ra ri ru re ro'.split()},
    {'name': 'Hiragana わ', 'kana': list('わをん'), 'romaji': 'wa wo n'.split()},
    {'name': 'Hiragana が', 'kana': list('がぎぐげご'), 'romaji': 'ga gi gu ge go'.split()},
    {'name': 'Hiragana ざ', 'kana': list('ざじずぜぞ'), 'romaji': 'za ji zu ze zo'.split()},
    {'name': 'Hiragana だ', 'kana': list('だぢづでど'), 'romaji': 'da ji zu de do'.split()},
    {'name': 'Hiragana ば', 'kana': list('ばびぶべぼ'), 'romaji': 'ba bi bu be bo'.split()},
    {'name': 'Hiragana ぱ', 'kana': list('ぱぴぷぺぽ'), 'romaji': 'pa pi pu pe po'.split()},
    # Katakana
    {'name': 'Katakana ア', 'kana': list('アイウエオ'), 'romaji': 'a i u e o'.split()},
    {'name': 'Katakana カ', 'kana': list('カキクケコ'), 'romaji': 'ka ki ku ke ko'.split()},
    {'name': 'Katakana サ', 'kana': list('サシスセソ'), 'romaji': 'sa shi su se so'.split()},
    {'name': 'Katakana タ', 'kana': list('タチツテト'), 'romaji': 'ta chi tsu te to'.split()},
    {'name': 'Katakana ナ', 'kana': list('ナニヌネノ'), 'romaji': 'na ni nu ne no'.split()},
    {'name': 'Katakana ハ', 'kana': list('ハヒフヘホ'), 'romaji': 'ha hi fu he ho'.split()},
    {'name': 'Katakana マ', 'kana': list('マミムメモ'), 'romaji': 'ma mi mu me mo'.split()},
    {'name': 'Katakana ヤ', 'kana': list('ヤユヨ'), 'romaji': 'ya yu yo'.split()},
    {'name': 'Katakana ラ', 'kana': list('ラリルレロ'), 'romaji': 'ra ri ru re ro'.split()},
    {'name': 'Katakana ワ', 'kana': list('ワヲン'), 'romaji': 'wa wo n'.split()},
    {'name': 'Katakana ガ', 'kana': list('ガギグゲゴ'), 'romaji': 'ga gi gu ge go'.split()},
    {'name': 'Katakana ザ', 'kana': list('ザジズゼゾ'), 'romaji': 'za ji zu ze zo'.split()},
    {'name': 'Katakana ダ', 'kana': list('ダヂヅデド'), 'romaji': 'da ji zu de do'.split()},
    {'name': 'Katakana バ', 'kana': list('バビブベボ'), 'romaji': 'ba bi bu be bo'.split()},
    {'name': 'Katakana パ', 'kana': list('パピプペポ'), 'romaji': 'pa pi pu pe po'.split()},
]


def _get_group(index: int) -> dict:
    """Look up a group by index. Raises IndexError for unknown indices."""
    if index < 0 or index >= len(KANA_GROUPS):
        raise IndexError(f"Unknown kana group: {index}")
    return KANA_GROUPS[index]


def get_all_groups() -> list[dict]:
    """List groups as {index, name, size} dicts."""
    return [
        {'index': i, 'name': group['name'], 'size': len(group['kana'])}
        for i, group in enumerate(KANA_GROUPS)
    ]


def get_group_name(index: int) -> str:
    return _get_group(index)['name']


def get_group_pairs(indices: list[int]) -> list[tuple[str, str]]:
    """Get (kana, romaji) pairs for the selected groups, in selection order.

    Selecting the same group twice does not duplicate its pairs.
    """
    pairs = []
    seen = set()
    for index in indices:
        if index in seen:
            continue
        seen.add(index)
        group = _get_group(index)
        pairs.extend(zip(group['kana'], group['romaji']))
    return pairs
