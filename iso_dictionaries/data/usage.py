"""
Country Usage Table
===================

The single authored source of the country/currency and country/language
relationships. Keys are country alpha-2 codes; values are
(currency alpha-3 codes, language alpha-2 codes), space separated.

Currency usage follows the ISO 4217 entity designations. Language usage is
drawn from general reference data rather than a normative standard, so treat
it as a versioned dataset that may be neither exhaustive nor aware of
disputed territories.
"""

COUNTRY_USAGE = {
    'AD': ('EUR', 'CA'),
    'AE': ('AED', 'AR'),
    'AF': ('AFN', 'FA PS'),
    'AG': ('XCD', 'EN'),
    'AI': ('XCD', 'EN'),
    'AL': ('ALL', 'SQ'),
    'AM': ('AMD', 'HY'),
    'AO': ('AOA', 'PT'),
    'AQ': ('', ''),
    'AR': ('ARS', 'ES'),
    'AS': ('USD', 'EN SM'),
    'AT': ('EUR', 'DE'),
    'AU': ('AUD', 'EN'),
    'AW': ('AWG', 'NL'),
    'AX': ('EUR', 'SV'),
    'AZ': ('AZN', 'AZ'),
    'BA': ('BAM', 'BS HR SR'),
    'BB': ('BBD', 'EN'),
    'BD': ('BDT', 'BN'),
    'BE': ('EUR', 'DE FR NL'),
    'BF': ('XOF', 'FR'),
    'BG': ('BGN', 'BG'),
    'BH': ('BHD', 'AR'),
    'BI': ('BIF', 'EN FR RN'),
    'BJ': ('XOF', 'FR'),
    'BL': ('EUR', 'FR'),
    'BM': ('BMD', 'EN'),
    'BN': ('BND', 'MS'),
    'BO': ('BOB BOV', 'AY ES GN QU'),
    'BQ': ('USD', 'NL'),
    'BR': ('BRL', 'PT'),
    'BS': ('BSD', 'EN'),
    'BT': ('BTN INR', 'DZ'),
    'BV': ('NOK', 'NO'),
    'BW': ('BWP', 'EN'),
    'BY': ('BYN', 'BE RU'),
    'BZ': ('BZD', 'EN'),
    'CA': ('CAD', 'EN FR'),
    'CC': ('AUD', 'EN MS'),
    'CD': ('CDF', 'FR'),
    'CF': ('XAF', 'FR SG'),
    'CG': ('XAF', 'FR'),
    'CH': ('CHE CHF CHW', 'DE FR IT RM'),
    'CI': ('XOF', 'FR'),
    'CK': ('NZD', 'EN'),
    'CL': ('CLF CLP', 'ES'),
    'CM': ('XAF', 'EN FR'),
    'CN': ('CNY', 'ZH'),
    'CO': ('COP COU', 'ES'),
    'CR': ('CRC', 'ES'),
    'CU': ('CUP', 'ES'),
    'CV': ('CVE', 'PT'),
    'CW': ('ANG', 'EN NL'),
    'CX': ('AUD', 'EN MS ZH'),
    'CY': ('EUR', 'EL TR'),
    'CZ': ('CZK', 'CS SK'),
    'DE': ('EUR', 'DE'),
    'DJ': ('DJF', 'AR FR'),
    'DK': ('DKK', 'DA'),
    'DM': ('XCD', 'EN'),
    'DO': ('DOP', 'ES'),
    'DZ': ('DZD', 'AR'),
    'EC': ('USD', 'ES QU'),
    'EE': ('EUR', 'ET'),
    'EG': ('EGP', 'AR'),
    'EH': ('MAD', 'AR ES'),
    'ER': ('ERN', 'TI'),
    'ES': ('EUR', 'ES'),
    'ET': ('ETB', 'AA AM OM SO TI'),
    'FI': ('EUR', 'FI SV'),
    'FJ': ('FJD', 'EN FJ'),
    'FK': ('FKP', 'EN'),
    'FM': ('USD', 'EN'),
    'FO': ('DKK', 'DA FO'),
    'FR': ('EUR', 'FR'),
    'GA': ('XAF', 'FR'),
    'GB': ('GBP', 'EN'),
    'GD': ('XCD', 'EN'),
    'GE': ('GEL', 'KA'),
    'GF': ('EUR', 'FR'),
    'GG': ('GBP', 'EN'),
    'GH': ('GHS', 'EN'),
    'GI': ('GIP', 'EN'),
    'GL': ('DKK', 'DA EN'),
    'GM': ('GMD', 'EN'),
    'GN': ('GNF', 'FR'),
    'GP': ('EUR', 'FR'),
    'GQ': ('XAF', 'ES FR PT'),
    'GR': ('EUR', 'EL'),
    'GS': ('', 'EN'),
    'GT': ('GTQ', 'ES'),
    'GU': ('USD', 'CH EN'),
    'GW': ('XOF', 'PT'),
    'GY': ('GYD', 'EN'),
    'HK': ('HKD', 'EN ZH'),
    'HM': ('AUD', 'EN'),
    'HN': ('HNL', 'ES'),
    'HR': ('EUR', 'HR'),
    'HT': ('HTG', 'FR HT'),
    'HU': ('HUF', 'HU'),
    'ID': ('IDR', 'ID'),
    'IE': ('EUR', 'EN GA'),
    'IL': ('ILS', 'HE'),
    'IM': ('GBP', 'EN GV'),
    'IN': ('INR', 'EN HI'),
    'IO': ('USD', 'EN'),
    'IQ': ('IQD', 'AR KU'),
    'IR': ('IRR', 'FA'),
    'IS': ('ISK', 'IS'),
    'IT': ('EUR', 'IT'),
    'JE': ('GBP', 'EN FR'),
    'JM': ('JMD', 'EN'),
    'JO': ('JOD', 'AR'),
    'JP': ('JPY', 'JA'),
    'KE': ('KES', 'EN SW'),
    'KG': ('KGS', 'KY RU'),
    'KH': ('KHR', 'KM'),
    'KI': ('AUD', 'EN'),
    'KM': ('KMF', 'AR FR'),
    'KN': ('XCD', 'EN'),
    'KP': ('KPW', 'KO'),
    'KR': ('KRW', 'KO'),
    'KW': ('KWD', 'AR'),
    'KY': ('KYD', 'EN'),
    'KZ': ('KZT', 'KK RU'),
    'LA': ('LAK', 'LO'),
    'LB': ('LBP', 'AR'),
    'LC': ('XCD', 'EN'),
    'LI': ('CHF', 'DE'),
    'LK': ('LKR', 'SI TA'),
    'LR': ('LRD', 'EN'),
    'LS': ('LSL ZAR', 'EN ST'),
    'LT': ('EUR', 'LT'),
    'LU': ('EUR', 'DE FR LB'),
    'LV': ('EUR', 'LV'),
    'LY': ('LYD', 'AR'),
    'MA': ('MAD', 'AR'),
    'MC': ('EUR', 'FR'),
    'MD': ('MDL', 'RO'),
    'ME': ('EUR', 'HR SR'),
    'MF': ('EUR', 'FR'),
    'MG': ('MGA', 'FR MG'),
    'MH': ('USD', 'EN MH'),
    'MK': ('MKD', 'MK SQ'),
    'ML': ('XOF', 'BM FF'),
    'MM': ('MMK', 'MY'),
    'MN': ('MNT', 'MN'),
    'MO': ('MOP', 'PT ZH'),
    'MP': ('USD', 'CH EN'),
    'MQ': ('EUR', 'FR'),
    'MR': ('MRU', 'AR'),
    'MS': ('XCD', 'EN'),
    'MT': ('EUR', 'EN MT'),
    'MU': ('MUR', 'EN'),
    'MV': ('MVR', 'DV'),
    'MW': ('MWK', 'EN NY'),
    'MX': ('MXN MXV', 'ES'),
    'MY': ('MYR', 'MS'),
    'MZ': ('MZN', 'PT'),
    'NA': ('NAD ZAR', 'EN'),
    'NC': ('XPF', 'FR'),
    'NE': ('XOF', 'FR'),
    'NF': ('AUD', 'EN'),
    'NG': ('NGN', 'EN'),
    'NI': ('NIO', 'ES'),
    'NL': ('EUR', 'NL'),
    'NO': ('NOK', 'NO'),
    'NP': ('NPR', 'NE'),
    'NR': ('AUD', 'EN NA'),
    'NU': ('NZD', 'EN'),
    'NZ': ('NZD', 'EN MI'),
    'OM': ('OMR', 'AR'),
    'PA': ('PAB USD', 'ES'),
    'PE': ('PEN', 'AY ES QU'),
    'PF': ('XPF', 'FR'),
    'PG': ('PGK', 'EN HO'),
    'PH': ('PHP', 'EN TL'),
    'PK': ('PKR', 'EN UR'),
    'PL': ('PLN', 'PL'),
    'PM': ('EUR', 'FR'),
    'PN': ('NZD', 'EN'),
    'PR': ('USD', 'EN ES'),
    'PS': ('', 'AR'),
    'PT': ('EUR', 'PT'),
    'PW': ('USD', 'EN'),
    'PY': ('PYG', 'ES GN'),
    'QA': ('QAR', 'AR'),
    'RE': ('EUR', 'FR'),
    'RO': ('RON', 'RO'),
    'RS': ('RSD', 'SR'),
    'RU': ('RUB', 'RU'),
    'RW': ('RWF', 'EN FR RW SW'),
    'SA': ('SAR', 'AR'),
    'SB': ('SBD', 'EN'),
    'SC': ('SCR', 'EN FR'),
    'SD': ('SDG', 'AR EN'),
    'SE': ('SEK', 'SV'),
    'SG': ('SGD', 'EN MS TA ZH'),
    'SH': ('GBP SHP', 'EN'),
    'SI': ('EUR', 'SL'),
    'SJ': ('NOK', 'NO'),
    'SK': ('EUR', 'SK'),
    'SL': ('SLE SLL', 'EN'),
    'SM': ('EUR', 'IT'),
    'SN': ('XOF', 'FR'),
    'SO': ('SOS', 'AR SO'),
    'SR': ('SRD', 'NL'),
    'SS': ('SSP', 'EN'),
    'ST': ('STN', 'PT'),
    'SV': ('SVC USD', 'ES'),
    'SX': ('ANG', 'EN NL'),
    'SY': ('SYP', 'AR'),
    'SZ': ('SZL ZAR', 'EN SS'),
    'TC': ('USD', 'EN'),
    'TD': ('XAF', 'AR FR'),
    'TF': ('EUR', 'FR'),
    'TG': ('XOF', 'FR'),
    'TH': ('THB', 'TH'),
    'TJ': ('TJS', 'TG'),
    'TK': ('NZD', 'EN'),
    'TL': ('USD', 'PT'),
    'TM': ('TMT', 'TK'),
    'TN': ('TND', 'AR'),
    'TO': ('TOP', 'EN TO'),
    'TR': ('TRY', 'TR'),
    'TT': ('TTD', 'EN'),
    'TV': ('AUD', 'EN'),
    'TW': ('TWD', 'ZH'),
    'TZ': ('TZS', 'EN SW'),
    'UA': ('UAH', 'UK'),
    'UG': ('UGX', 'EN SW'),
    'UM': ('USD', 'EN'),
    'US': ('USD USN', 'EN'),
    'UY': ('UYI UYU UYW', 'ES'),
    'UZ': ('UZS', 'UZ'),
    'VA': ('EUR', 'IT LA'),
    'VC': ('XCD', 'EN'),
    'VE': ('VED VES', 'ES'),
    'VG': ('USD', 'EN'),
    'VI': ('USD', 'EN'),
    'VN': ('VND', 'VI'),
    'VU': ('VUV', 'BI EN FR'),
    'WF': ('XPF', 'FR'),
    'WS': ('WST', 'EN SM'),
    'YE': ('YER', 'AR'),
    'YT': ('EUR', 'FR'),
    'ZA': ('ZAR', 'AF EN NR SS ST TN TS VE XH ZU'),
    'ZM': ('ZMW', 'EN'),
    'ZW': ('ZWL', 'EN NR NY SN ST TN VE XH'),
}
