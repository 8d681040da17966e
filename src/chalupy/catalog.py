"""Known region and feature slugs (the vetted filter vocabulary).

Catalog pages are filtered against these lists: a slug the site renders but
that is not listed here is ignored.
"""

from __future__ import annotations

KNOWN_REGIONS: dict[str, str] = {
    "krkonose": "Krkonoše",
    "sumava": "Šumava",
    "jeseniky": "Jeseníky",
    "vysocina": "Vysočina",
    "beskydy": "Beskydy",
    "orlicke-hory": "Orlické hory",
    "jizerske-hory": "Jizerské hory",
    "krusne-hory": "Krušné hory",
    "ceske-svycarsko": "České Švýcarsko",
    "cesky-raj": "Český ráj",
    "podkrkonosi": "Podkrkonoší",
    "lipno": "Lipno",
    "brdy": "Brdy",
    "bile-karpaty": "Bílé Karpaty",
    "valassko": "Valašsko",
    "jizni-morava": "Jižní Morava",
    "ceska-kanada": "Česká Kanada",
    "posumavi": "Pošumaví",
    "doksy-machovo-jezero": "Máchovo jezero",
    "slapy": "Slapy",
    "orlik": "Orlík",
    "jihocesky-kraj": "Jihočeský kraj",
    "jihomoravsky-kraj": "Jihomoravský kraj",
    "karlovarsky-kraj": "Karlovarský kraj",
    "kralovehradecky-kraj": "Královéhradecký kraj",
    "liberecky-kraj": "Liberecký kraj",
    "moravskoslezsky-kraj": "Moravskoslezský kraj",
    "olomoucky-kraj": "Olomoucký kraj",
    "pardubicky-kraj": "Pardubický kraj",
    "plzensky-kraj": "Plzeňský kraj",
    "stredocesky-kraj": "Středočeský kraj",
    "ustecky-kraj": "Ústecký kraj",
    "zlinsky-kraj": "Zlínský kraj",
}

KNOWN_FEATURES: dict[str, str] = {
    "bazen-venkovni": "Venkovní bazén",
    "bazen-vnitrni": "Vnitřní bazén",
    "se-saunou": "Se saunou",
    "s-virivkou": "S vířivkou",
    "s-krbem": "S krbem",
    "se-psem": "Pobyt se psem",
    "s-wifi": "Wi-Fi",
    "s-detskym-hristem": "Dětské hřiště",
    "s-grilem": "Gril",
    "s-ohnistem": "Ohniště",
    "u-vody": "U vody",
    "u-sjezdovky": "U sjezdovky",
    "s-kulecnikem": "Kulečník",
    "se-stolnim-tenisem": "Stolní tenis",
    "bezbarierove": "Bezbariérové",
    "samota": "Na samotě",
}
