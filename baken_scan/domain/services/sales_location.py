"""発売場所コードの変換テーブル."""

# 競馬場・ウインズ・エクセル等の4桁コード
SALES_LOCATIONS: dict[str, str] = {
    "0101": "JRA札幌",
    "0202": "JRA函館",
    "0303": "JRA福島",
    "0404": "JRA新潟",
    "0505": "JRA東京",
    "0606": "JRA中山",
    "0707": "JRA中京",
    "0808": "JRA京都",
    "0909": "JRA阪神",
    "1010": "JRA小倉",
    "3030": "ウインズ札幌",
    "3039": "ウインズ釧路",
    "3071": "ウインズ津軽",
    "3068": "ウインズ盛岡",
    "3064": "ウインズ水沢",
    "3286": "ウインズ三本木",
    "3019": "ウインズ新白河",
    "3213": "ウインズ銀座",
    "3232": "ウインズ後楽園",
    "2222": "ウインズ錦糸町",
    "2218": "ウインズ浅草",
    "3434": "ウインズ汐留",
    "4200": "ウインズ新宿",
    "3216": "ウインズ渋谷",
    "3441": "ウインズ立川",
    "3284": "ウインズ川崎",
    "3220": "ウインズ横浜",
    "2100": "ウインズ新横浜",
    "3421": "ウインズ新横浜",
    "2287": "ライトウインズ阿見",
    "3285": "ウインズ浦和",
    "3240": "ウインズ石和",
    "3470": "エクセル田無",
    "3262": "エクセル伊勢佐木",
    "2426": "ウインズ名古屋",
    "2427": "ウインズ京都",
    "2424": "ウインズ難波",
    "2929": "ウインズ道頓堀",
    "2423": "ウインズ梅田",
    "2944": "ウインズ神戸",
    "2974": "ウインズ姫路",
    "3483": "エクセル浜松",
    "2989": "ライトウインズりんくうタウン",
    "3828": "ウインズ米子",
    "3838": "ウインズ広島",
    "2877": "ウインズ小郡",
    "3846": "ウインズ高松",
    "3833": "ウインズ佐世保",
    "2482": "ウインズ八代",
    "2881": "ウインズ宮崎",
    "3800": "エクセル博多",
    "2867": "ウインズ佐賀",
    "3481": "宮崎育成牧場",
}


def resolve_sales_location(code: str) -> str:
    """発売場所コードを名称に変換する（未登録のコードはそのまま返す）."""
    return SALES_LOCATIONS.get(code, code)
