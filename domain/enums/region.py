"""Region enumeration for League of Legends servers."""
from enum import Enum


class Region(Enum):
    """League of Legends platform servers.

    Provides:
    - platform_route: platform host for summoner/league APIs (e.g., euw1)
    - regional_route: routing host for match APIs (e.g., europe)
    - account_route: routing host for account-v1 (no "sea" cluster there)
    - friendly: short label players type (e.g., euw)
    """

    # Europe
    EUW1 = "euw1"  # Europe West
    EUN1 = "eun1"  # Europe Nordic & East
    TR1 = "tr1"    # Turkey
    RU = "ru"      # Russia
    ME1 = "me1"    # Middle East

    # Americas
    NA1 = "na1"    # North America
    BR1 = "br1"    # Brazil
    LA1 = "la1"    # Latin America North
    LA2 = "la2"    # Latin America South

    # Asia
    KR = "kr"      # Korea
    JP1 = "jp1"    # Japan

    # SEA & Oceania
    OC1 = "oc1"    # Oceania
    PH2 = "ph2"    # Philippines
    SG2 = "sg2"    # Singapore
    TH2 = "th2"    # Thailand
    TW2 = "tw2"    # Taiwan
    VN2 = "vn2"    # Vietnam

    @property
    def platform_route(self) -> str:
        return self.value

    @property
    def regional_route(self) -> str:
        """Routing cluster for match-v5."""
        return _REGIONAL_ROUTES[self.value]

    @property
    def account_route(self) -> str:
        """Routing cluster for account-v1, which only serves americas/europe/asia."""
        route = self.regional_route
        return "asia" if route == "sea" else route

    @property
    def friendly(self) -> str:
        """Short upper-case label, e.g. ``EUW`` or ``NA``."""
        return _FRIENDLY[self.value]

    @classmethod
    def all_regions(cls) -> list['Region']:
        return list(cls)

    @classmethod
    def from_string(cls, value: str) -> 'Region':
        """Accept either a platform id (``euw1``) or a friendly label (``EUW``).

        Raises:
            ValueError: if the value names no known server.
        """
        code = (value or "").strip().lower()
        for region in cls:
            if code == region.value or code == region.friendly.lower():
                return region
        raise ValueError(f"Unsupported region '{value}'")


_REGIONAL_ROUTES = {
    "na1": "americas", "br1": "americas", "la1": "americas", "la2": "americas",
    "euw1": "europe", "eun1": "europe", "tr1": "europe", "ru": "europe", "me1": "europe",
    "kr": "asia", "jp1": "asia",
    "oc1": "sea", "ph2": "sea", "sg2": "sea", "th2": "sea", "tw2": "sea", "vn2": "sea",
}

_FRIENDLY = {
    "eun1": "EUNE", "euw1": "EUW", "tr1": "TR", "ru": "RU", "me1": "ME",
    "na1": "NA", "br1": "BR", "la1": "LAN", "la2": "LAS",
    "kr": "KR", "jp1": "JP",
    "oc1": "OCE", "ph2": "PH", "sg2": "SG", "th2": "TH", "tw2": "TW", "vn2": "VN",
}
