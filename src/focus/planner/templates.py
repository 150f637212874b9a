"""
Offline data for micro-skill plans: topic descriptors used in prompts and the
fixed 21-title fallback lists, one per category, in teaching order.
"""

from focus.wizard.schemas import SmartCategory

MAX_PLAN_DAYS = 21

CATEGORY_TOPICS: dict[SmartCategory, str] = {
    SmartCategory.FINANCIAL_BASICS: "pénzügyek, megtakarítás, befektetés, költségvetés, pénzügyi alapfogalmak",
    SmartCategory.DIGITAL_LITERACY: "digitális jártasság, online biztonság, AI eszközök, adatvédelem, technológia",
    SmartCategory.COMMUNICATION_SOCIAL: "kommunikáció, prezentáció, tárgyalás, social skillek, networking",
    SmartCategory.STUDY_BRAIN_SKILLS: "tanulási technikák, memória, fókusz, hatékony tanulás, agytréning",
    SmartCategory.KNOWLEDGE_BITES: "általános műveltség, tudomány, történelem, kultúra, érdekességek",
}

FALLBACK_TITLES: dict[SmartCategory, tuple[str, ...]] = {
    SmartCategory.FINANCIAL_BASICS: (
        "Mi az a nettó pénz?",
        "20% fejben számolás",
        "Előfizetés csapdák",
        "Spórolás vs. befektetés",
        "Mi az az infláció?",
        "Bankszámla típusok",
        "Hitelkártya 101",
        "Első megtakarítás terv",
        "Adó alapok egyszerűen",
        "Mit jelent a kamatláb?",
        "Impulzusvásárlás hack-ek",
        "50/30/20 szabály",
        "Crypto röviden",
        "Mibe fektess kicsiben?",
        "Biztosítás: kell vagy sem?",
        "Albérlet pénzügyek",
        "Fizetésemelés kérése",
        "Pénzügyi vészhelyzet terv",
        "Online fizetés biztonság",
        "Előfizetés audit nap",
        "Heti pénzügyi rutin",
    ),
    SmartCategory.DIGITAL_LITERACY: (
        "Jelszó-higiénia",
        "Phishing felismerés",
        "AI promptolás alapok",
        "VPN: kell vagy hype?",
        "Cookie-k és tracking",
        "Kétfaktoros hitelesítés",
        "Deepfake felismerés",
        "Cloud tárolás okosan",
        "Social media adatvédelem",
        "Google keresés profi szint",
        "Digitális lábnyom audit",
        "Spam vs. scam",
        "Open source eszközök",
        "Screenshot és screen record",
        "Email etikett 2025",
        "Backup stratégia",
        "Browser bővítmények",
        "AI képgenerálás alapok",
        "Digitális minimalizmus",
        "Online reputáció kezelés",
        "Tech news szűrés",
    ),
    SmartCategory.COMMUNICATION_SOCIAL: (
        "Lift pitch 30mp-ben",
        "Aktív hallgatás technika",
        "Nemleges válasz diplomatikusan",
        "Small talk témák",
        "Testbeszéd alapok",
        "Feedback adás-kapás",
        "Konfliktusmegoldás 101",
        "Prezentáció struktúra",
        "Asszertív kommunikáció",
        "Networking tippek",
        "Storytelling ereje",
        "Email: rövid és hatékony",
        "Empátia gyakorlat",
        "Kérdezéstechnika",
        "Csoportdinamika",
        "Online meeting etikett",
        "Határok kommunikálása",
        "Meggyőzés vs. manipuláció",
        "Humor a kommunikációban",
        "Kulturális különbségek",
        "Heti kommunikációs kihívás",
    ),
    SmartCategory.STUDY_BRAIN_SKILLS: (
        "Pomodoro technika",
        "Spaced repetition",
        "Flow állapot elérése",
        "Aktív vs. passzív tanulás",
        "Jegyzetelés: Cornell módszer",
        "Memóriapalota technika",
        "Alvás és tanulás kapcsolata",
        "Fókusz-zónák kialakítása",
        "Feynman technika",
        "Digitális detox tanuláshoz",
        "Mind mapping",
        "Multitasking mítosz",
        "Motiváció vs. fegyelem",
        "Vizuális tanulás hack-ek",
        "Olvasási sebesség növelés",
        "Stresszkezelés vizsgák előtt",
        "Tanulási platók áttörése",
        "Chunking módszer",
        "Retrieval practice",
        "Napirend optimalizálás",
        "Heti tanulási retrospektív",
    ),
    SmartCategory.KNOWLEDGE_BITES: (
        "Miért kék az ég?",
        "GDP mit mér valójában?",
        "Placebo hatás titka",
        "Hogyan működik a WiFi?",
        "Mi az a kognitív torzítás?",
        "Miért alszunk?",
        "Kvantumfizika 60mp-ben",
        "Évszakok miértje",
        "Hogyan készül a csokoládé?",
        "Mi az a blockchain?",
        "Miért van déjà vu?",
        "Antibiotikum rezisztencia",
        "Miért vagyunk társas lények?",
        "Mesterséges intelligencia röviden",
        "Vulkánok működése",
        "Mi a sötét anyag?",
        "Hogyan tanulnak a gépek?",
        "Miért felejtünk?",
        "Színek pszichológiája",
        "Mi az a CRISPR?",
        "Heti tudáskihívás",
    ),
}


def fallback_titles(category: SmartCategory, count: int) -> list[str]:
    """First `count` built-in titles of the category, in fixed order."""
    return list(FALLBACK_TITLES[SmartCategory(category)][:count])
