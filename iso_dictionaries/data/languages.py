"""
Language Catalogue
==================

ISO 639-1 languages, each member named by its two-letter code.

The list of codes is available from https://www.iso.org/iso-639-language-code
and from https://en.wikipedia.org/wiki/List_of_ISO_639-1_codes.
"""

from ..catalogue import LanguageEntry


class Language(LanguageEntry):
    AA = 'Afar'
    AB = 'Abkhazian'
    AE = 'Avestan'
    AF = 'Afrikaans'
    AK = 'Akan'
    AM = 'Amharic'
    AN = 'Aragonese'
    AR = 'Arabic'
    AS = 'Assamese'
    AV = 'Avaric'
    AY = 'Aymara'
    AZ = 'Azerbaijani'
    BA = 'Bashkir'
    BE = 'Belarusian'
    BG = 'Bulgarian'
    BI = 'Bislama'
    BM = 'Bambara'
    BN = 'Bengali'
    BO = 'Tibetan'
    BR = 'Breton'
    BS = 'Bosnian'
    CA = 'Catalan'
    CE = 'Chechen'
    CH = 'Chamorro'
    CO = 'Corsican'
    CR = 'Cree'
    CS = 'Czech'
    CU = 'Church Slavonic'
    CV = 'Chuvash'
    CY = 'Welsh'
    DA = 'Danish'
    DE = 'German'
    DV = 'Divehi'
    DZ = 'Dzongkha'
    EE = 'Ewe'
    EL = 'Greek'
    EN = 'English'
    EO = 'Esperanto'
    ES = 'Spanish'
    ET = 'Estonian'
    EU = 'Basque'
    FA = 'Persian'
    FF = 'Fulah'
    FI = 'Finnish'
    FJ = 'Fijian'
    FO = 'Faroese'
    FR = 'French'
    FY = 'Western Frisian'
    GA = 'Irish'
    GD = 'Gaelic'
    GL = 'Galician'
    GN = 'Guarani'
    GU = 'Gujarati'
    GV = 'Manx'
    HA = 'Hausa'
    HE = 'Hebrew'
    HI = 'Hindi'
    HO = 'Hiri Motu'
    HR = 'Croatian'
    HT = 'Haitian'
    HU = 'Hungarian'
    HY = 'Armenian'
    HZ = 'Herero'
    IA = 'Interlingua'
    ID = 'Indonesian'
    IE = 'Interlingue'
    IG = 'Igbo'
    II = 'Sichuan Yi'
    IK = 'Inupiaq'
    IO = 'Ido'
    IS = 'Icelandic'
    IT = 'Italian'
    IU = 'Inuktitut'
    JA = 'Japanese'
    JV = 'Javanese'
    KA = 'Georgian'
    KG = 'Kongo'
    KI = 'Kikuyu'
    KJ = 'Kuanyama'
    KK = 'Kazakh'
    KL = 'Kalaallisut'
    KM = 'Central Khmer'
    KN = 'Kannada'
    KO = 'Korean'
    KR = 'Kanuri'
    KS = 'Kashmiri'
    KU = 'Kurdish'
    KV = 'Komi'
    KW = 'Cornish'
    KY = 'Kirghiz'
    LA = 'Latin'
    LB = 'Luxembourgish'
    LG = 'Ganda'
    LI = 'Limburgan'
    LN = 'Lingala'
    LO = 'Lao'
    LT = 'Lithuanian'
    LU = 'Luba-Katanga'
    LV = 'Latvian'
    MG = 'Malagasy'
    MH = 'Marshallese'
    MI = 'Maori'
    MK = 'Macedonian'
    ML = 'Malayalam'
    MN = 'Mongolian'
    MR = 'Marathi'
    MS = 'Malay'
    MT = 'Maltese'
    MY = 'Burmese'
    NA = 'Nauru'
    NB = 'Norwegian Bokmål'
    ND = 'North Ndebele'
    NE = 'Nepali'
    NG = 'Ndonga'
    NL = 'Dutch'
    NN = 'Norwegian Nynorsk'
    NO = 'Norwegian'
    NR = 'South Ndebele'
    NV = 'Navajo'
    NY = 'Chichewa'
    OC = 'Occitan'
    OJ = 'Ojibwa'
    OM = 'Oromo'
    OR = 'Oriya'
    OS = 'Ossetian'
    PA = 'Punjabi'
    PI = 'Pali'
    PL = 'Polish'
    PS = 'Pashto'
    PT = 'Portuguese'
    QU = 'Quechua'
    RM = 'Romansh'
    RN = 'Rundi'
    RO = 'Romanian'
    RU = 'Russian'
    RW = 'Kinyarwanda'
    SA = 'Sanskrit'
    SC = 'Sardinian'
    SD = 'Sindhi'
    SE = 'Northern Sami'
    SG = 'Sango'
    SI = 'Sinhala'
    SK = 'Slovak'
    SL = 'Slovenian'
    SM = 'Samoan'
    SN = 'Shona'
    SO = 'Somali'
    SQ = 'Albanian'
    SR = 'Serbian'
    SS = 'Swati'
    ST = 'Southern Sotho'
    SU = 'Sundanese'
    SV = 'Swedish'
    SW = 'Swahili'
    TA = 'Tamil'
    TE = 'Telugu'
    TG = 'Tajik'
    TH = 'Thai'
    TI = 'Tigrinya'
    TK = 'Turkmen'
    TL = 'Tagalog'
    TN = 'Tswana'
    TO = 'Tonga'
    TR = 'Turkish'
    TS = 'Tsonga'
    TT = 'Tatar'
    TW = 'Twi'
    TY = 'Tahitian'
    UG = 'Uighur'
    UK = 'Ukrainian'
    UR = 'Urdu'
    UZ = 'Uzbek'
    VE = 'Venda'
    VI = 'Vietnamese'
    VO = 'Volapük'
    WA = 'Walloon'
    WO = 'Wolof'
    XH = 'Xhosa'
    YI = 'Yiddish'
    YO = 'Yoruba'
    ZA = 'Zhuang'
    ZH = 'Chinese'
    ZU = 'Zulu'
