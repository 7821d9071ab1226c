"""
Built-in catalog of known pirate applications.

Identifiers are kept as fragments so the complete package names do not show
up as plain strings in the source.
"""

from piracychecker.lib.pirate_app import AppCategory, PirateApp

KNOWN_PIRATE_APPS: tuple[PirateApp, ...] = (
    # Patchers and cheat tools
    PirateApp("Lucky Patcher", ["com.", "chelpus.", "lackypatch"]),
    PirateApp("Lucky Patcher", ["com.", "dimonvideo.", "luckypatcher"]),
    PirateApp("Lucky Patcher", ["com.", "forpda.", "lp"]),
    PirateApp("Lucky Patcher", ["com.", "android.", "vendinf"]),
    PirateApp("Lucky Patcher", ["com.", "android.", "vending.", "billing.", "InAppBillingService.", "LUCK"]),
    PirateApp("Lucky Patcher", ["com.", "android.", "vending.", "billing.", "InAppBillingService.", "LOCK"]),
    PirateApp("Lucky Patcher", ["com.", "android.", "vending.", "billing.", "InAppBillingService.", "CLON"]),
    PirateApp("Lucky Patcher", ["com.", "android.", "vending.", "billing.", "InAppBillingService.", "CRAC"]),
    PirateApp("Lucky Patcher", ["com.", "android.", "vending.", "billing.", "InAppBillingService.", "COIN"]),
    PirateApp("Uret Patcher", ["uret.", "jasi2169.", "patcher"]),
    PirateApp("Uret Patcher", ["zone.", "jasi2169.", "uretpatcher"]),
    PirateApp("ActionLauncherPatcher", ["p.", "jasi2169.", "al3"]),
    PirateApp("Freedom", ["cc.", "madkite.", "freedom"]),
    PirateApp("Freedom", ["cc.", "cz.", "madkite.", "freedom"]),
    PirateApp("CreeHack", ["org.", "creeplays.", "hack"]),
    PirateApp("HappyMod", ["com.", "happymod.", "apk"]),
    PirateApp("Game Hacker", ["org.", "sbtools.", "gamehack"]),
    PirateApp("Game Killer Cheats", ["com.", "zune.", "gamekiller"]),
    PirateApp("AGK - App Killer", ["com.", "aag.", "killer"]),
    PirateApp("Game Killer", ["com.", "killerapp.", "gamekiller"]),
    PirateApp("Game Killer", ["cn.", "lm.", "sq"]),
    PirateApp("Game CIH", ["net.", "schwarzis.", "game_cih"]),
    PirateApp("Game Guardian", ["com.", "gameguardian.", "app"]),
    PirateApp("Xmodgames", ["com.", "xmodgame"]),
    # Unauthorized stores
    PirateApp("Aptoide", ["cm.", "aptoide.", "pt"], AppCategory.STORE),
    PirateApp("BlackMart", ["org.", "blackmart.", "market"], AppCategory.STORE),
    PirateApp("BlackMart", ["com.", "blackmartalpha"], AppCategory.STORE),
    PirateApp("Mobogenie", ["com.", "mobogenie"], AppCategory.STORE),
    PirateApp("1Mobile", ["me.", "onemobile.", "android"], AppCategory.STORE),
    PirateApp("GetApk", ["com.", "repodroid.", "app"], AppCategory.STORE),
    PirateApp("GetJar", ["com.", "getjar.", "rewards"], AppCategory.STORE),
    PirateApp("SlideMe", ["com.", "slideme.", "sam.", "manager"], AppCategory.STORE),
    PirateApp("ACMarket", ["net.", "appcake"], AppCategory.STORE),
    PirateApp("ACMarket", ["ac.", "market.", "store"], AppCategory.STORE),
    PirateApp("AppCake", ["com.", "appcake"], AppCategory.STORE),
    PirateApp("Z Market", ["com.", "zmapp"], AppCategory.STORE),
    PirateApp("Modded Play Store", ["com.", "dv.", "marketmod.", "installer"], AppCategory.STORE),
    PirateApp("Mobilism Market", ["org.", "mobilism.", "android"], AppCategory.STORE),
    PirateApp("All-in-One Downloader", ["com.", "allinone.", "free"], AppCategory.STORE),
)


def get_pirate_apps(include_stores: bool = True) -> list[PirateApp]:
    """
    Return the known pirate apps.

    Args:
        include_stores (bool, optional): Keep unauthorized stores in the result.

    Returns:
        list[PirateApp]: Catalog entries, in catalog order.
    """

    if include_stores:
        return list(KNOWN_PIRATE_APPS)

    return [app for app in KNOWN_PIRATE_APPS if app.category is not AppCategory.STORE]
