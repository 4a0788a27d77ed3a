"""Currency -- ISO 4217 metadata table: names, symbols, exponents."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from money_kernel.exceptions import InvalidArgumentError, UnknownCurrencyError


@dataclass(frozen=True)
class CurrencyInfo:
    """Display attributes of a single currency."""

    code: str
    name: str
    symbol: str
    exponent: int
    symbol_on_right: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or len(self.code.strip()) != 3:
            raise InvalidArgumentError("currency code", self.code, "must be 3 characters")
        # Same shape rule as Money, so every table code can back a Money
        if not self.code.strip().isalpha():
            raise InvalidArgumentError("currency code", self.code, "must be 3 letters")
        object.__setattr__(self, "code", self.code.upper().strip())
        if not self.name:
            raise InvalidArgumentError("currency name", self.name, "must be non-empty")
        if isinstance(self.exponent, bool) or not isinstance(self.exponent, int):
            raise InvalidArgumentError("exponent", self.exponent, "must be an integer")
        if not 0 <= self.exponent <= 18:
            raise InvalidArgumentError("exponent", self.exponent, "must be between 0 and 18")

    @property
    def minor_units_per_major(self) -> int:
        """How many minor units make one major unit (100 for cents)."""
        return 10 ** self.exponent


def normalize_code(code: Any) -> str:
    """Upper-case and strip a currency code; reject non-strings."""
    if not isinstance(code, str) or not code.strip():
        raise UnknownCurrencyError(code)
    return code.upper().strip()


class CurrencyTable:
    """
    Immutable lookup table from currency code to CurrencyInfo.

    Contract:
        Lookups are pure and O(1). The table is never mutated after
        construction; ``with_custom`` returns a new table.

    Guarantees:
        - Codes are normalized before lookup.
        - Unknown codes raise UnknownCurrencyError, never a default.
    """

    __slots__ = ("_currencies",)

    def __init__(self, currencies: Iterable[CurrencyInfo]):
        table: dict[str, CurrencyInfo] = {}
        for info in currencies:
            table[info.code] = info
        self._currencies: Mapping[str, CurrencyInfo] = MappingProxyType(table)

    def get(self, code: Any) -> CurrencyInfo:
        normalized = normalize_code(code)
        info = self._currencies.get(normalized)
        if info is None:
            raise UnknownCurrencyError(code)
        return info

    def exists(self, code: Any) -> bool:
        if not isinstance(code, str):
            return False
        return code.upper().strip() in self._currencies

    def validate(self, code: Any) -> str:
        """Return the normalized code if known, else raise UnknownCurrencyError."""
        return self.get(code).code

    def symbol(self, code: Any) -> str:
        return self.get(code).symbol

    def name(self, code: Any) -> str:
        return self.get(code).name

    def exponent(self, code: Any) -> int:
        return self.get(code).exponent

    def all_codes(self) -> frozenset[str]:
        return frozenset(self._currencies)

    def all_currencies(self) -> dict[str, CurrencyInfo]:
        return dict(self._currencies)

    def with_custom(self, custom: Iterable[CurrencyInfo]) -> "CurrencyTable":
        """New table with custom currencies added (or replacing built-ins)."""
        return CurrencyTable([*self._currencies.values(), *custom])

    def __contains__(self, code: object) -> bool:
        return self.exists(code)

    def __len__(self) -> int:
        return len(self._currencies)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurrencyTable):
            return NotImplemented
        return dict(self._currencies) == dict(other._currencies)

    def __hash__(self) -> int:
        return hash(frozenset(self._currencies.items()))

    def __repr__(self) -> str:
        return f"CurrencyTable({len(self._currencies)} currencies)"


# ISO 4217 currencies with their symbols and exponents
# Source: https://www.iso.org/iso-4217-currency-codes.html
BUILTIN_CURRENCIES: tuple[CurrencyInfo, ...] = (
    # Major currencies
    CurrencyInfo("USD", "US Dollar", "$", 2),
    CurrencyInfo("EUR", "Euro", "€", 2),
    CurrencyInfo("GBP", "Pound Sterling", "£", 2),
    CurrencyInfo("JPY", "Japanese Yen", "¥", 0),
    CurrencyInfo("CHF", "Swiss Franc", "CHF", 2),
    CurrencyInfo("CAD", "Canadian Dollar", "$", 2),
    CurrencyInfo("AUD", "Australian Dollar", "$", 2),
    CurrencyInfo("NZD", "New Zealand Dollar", "$", 2),
    CurrencyInfo("CNY", "Chinese Yuan", "¥", 2),
    # Zero decimal currencies
    CurrencyInfo("BIF", "Burundian Franc", "FBu", 0),
    CurrencyInfo("CLP", "Chilean Peso", "$", 0),
    CurrencyInfo("DJF", "Djiboutian Franc", "Fdj", 0),
    CurrencyInfo("GNF", "Guinean Franc", "FG", 0),
    CurrencyInfo("ISK", "Icelandic Krona", "kr", 0, symbol_on_right=True),
    CurrencyInfo("KMF", "Comorian Franc", "CF", 0),
    CurrencyInfo("KRW", "South Korean Won", "₩", 0),
    CurrencyInfo("PYG", "Paraguayan Guarani", "₲", 0),
    CurrencyInfo("RWF", "Rwandan Franc", "FRw", 0),
    CurrencyInfo("UGX", "Ugandan Shilling", "USh", 0),
    CurrencyInfo("UYI", "Uruguay Peso en Unidades Indexadas", "UYI", 0),
    CurrencyInfo("VND", "Vietnamese Dong", "₫", 0, symbol_on_right=True),
    CurrencyInfo("VUV", "Vanuatu Vatu", "VT", 0),
    CurrencyInfo("XAF", "Central African CFA Franc", "FCFA", 0),
    CurrencyInfo("XOF", "West African CFA Franc", "CFA", 0),
    CurrencyInfo("XPF", "CFP Franc", "₣", 0),
    # Three decimal currencies
    CurrencyInfo("BHD", "Bahraini Dinar", "BD", 3),
    CurrencyInfo("IQD", "Iraqi Dinar", "ع.د", 3),
    CurrencyInfo("JOD", "Jordanian Dinar", "JD", 3),
    CurrencyInfo("KWD", "Kuwaiti Dinar", "KD", 3),
    CurrencyInfo("LYD", "Libyan Dinar", "LD", 3),
    CurrencyInfo("OMR", "Omani Rial", "﷼", 3),
    CurrencyInfo("TND", "Tunisian Dinar", "DT", 3),
    # Four decimal currencies
    CurrencyInfo("CLF", "Chilean Unidad de Fomento", "UF", 4),
    CurrencyInfo("UYW", "Unidad Previsional", "UYW", 4),
    # Standard two decimal currencies
    CurrencyInfo("AED", "UAE Dirham", "د.إ", 2),
    CurrencyInfo("AFN", "Afghan Afghani", "؋", 2),
    CurrencyInfo("ALL", "Albanian Lek", "L", 2),
    CurrencyInfo("AMD", "Armenian Dram", "֏", 2),
    CurrencyInfo("ANG", "Netherlands Antillean Guilder", "ƒ", 2),
    CurrencyInfo("AOA", "Angolan Kwanza", "Kz", 2),
    CurrencyInfo("ARS", "Argentine Peso", "$", 2),
    CurrencyInfo("AWG", "Aruban Florin", "ƒ", 2),
    CurrencyInfo("AZN", "Azerbaijan Manat", "₼", 2),
    CurrencyInfo("BAM", "Bosnia and Herzegovina Convertible Mark", "KM", 2),
    CurrencyInfo("BBD", "Barbadian Dollar", "$", 2),
    CurrencyInfo("BDT", "Bangladeshi Taka", "৳", 2),
    CurrencyInfo("BGN", "Bulgarian Lev", "лв", 2),
    CurrencyInfo("BMD", "Bermudian Dollar", "$", 2),
    CurrencyInfo("BND", "Brunei Dollar", "$", 2),
    CurrencyInfo("BOB", "Bolivian Boliviano", "Bs.", 2),
    CurrencyInfo("BRL", "Brazilian Real", "R$", 2),
    CurrencyInfo("BSD", "Bahamian Dollar", "$", 2),
    CurrencyInfo("BTN", "Bhutanese Ngultrum", "Nu.", 2),
    CurrencyInfo("BWP", "Botswana Pula", "P", 2),
    CurrencyInfo("BYN", "Belarusian Ruble", "Br", 2),
    CurrencyInfo("BZD", "Belize Dollar", "BZ$", 2),
    CurrencyInfo("CDF", "Congolese Franc", "FC", 2),
    CurrencyInfo("COP", "Colombian Peso", "$", 2),
    CurrencyInfo("CRC", "Costa Rican Colon", "₡", 2),
    CurrencyInfo("CUP", "Cuban Peso", "₱", 2),
    CurrencyInfo("CVE", "Cape Verdean Escudo", "$", 2),
    CurrencyInfo("CZK", "Czech Koruna", "Kč", 2, symbol_on_right=True),
    CurrencyInfo("DKK", "Danish Krone", "kr", 2, symbol_on_right=True),
    CurrencyInfo("DOP", "Dominican Peso", "RD$", 2),
    CurrencyInfo("DZD", "Algerian Dinar", "دج", 2),
    CurrencyInfo("EGP", "Egyptian Pound", "£", 2),
    CurrencyInfo("ERN", "Eritrean Nakfa", "Nfk", 2),
    CurrencyInfo("ETB", "Ethiopian Birr", "Br", 2),
    CurrencyInfo("FJD", "Fijian Dollar", "$", 2),
    CurrencyInfo("FKP", "Falkland Islands Pound", "£", 2),
    CurrencyInfo("GEL", "Georgian Lari", "₾", 2),
    CurrencyInfo("GHS", "Ghanaian Cedi", "₵", 2),
    CurrencyInfo("GIP", "Gibraltar Pound", "£", 2),
    CurrencyInfo("GMD", "Gambian Dalasi", "D", 2),
    CurrencyInfo("GTQ", "Guatemalan Quetzal", "Q", 2),
    CurrencyInfo("GYD", "Guyanese Dollar", "$", 2),
    CurrencyInfo("HKD", "Hong Kong Dollar", "$", 2),
    CurrencyInfo("HNL", "Honduran Lempira", "L", 2),
    CurrencyInfo("HTG", "Haitian Gourde", "G", 2),
    CurrencyInfo("HUF", "Hungarian Forint", "Ft", 2, symbol_on_right=True),
    CurrencyInfo("IDR", "Indonesian Rupiah", "Rp", 2),
    CurrencyInfo("ILS", "Israeli New Shekel", "₪", 2),
    CurrencyInfo("INR", "Indian Rupee", "₹", 2),
    CurrencyInfo("IRR", "Iranian Rial", "﷼", 2),
    CurrencyInfo("JMD", "Jamaican Dollar", "J$", 2),
    CurrencyInfo("KES", "Kenyan Shilling", "KSh", 2),
    CurrencyInfo("KGS", "Kyrgyzstani Som", "сом", 2),
    CurrencyInfo("KHR", "Cambodian Riel", "៛", 2),
    CurrencyInfo("KPW", "North Korean Won", "₩", 2),
    CurrencyInfo("KYD", "Cayman Islands Dollar", "$", 2),
    CurrencyInfo("KZT", "Kazakhstani Tenge", "₸", 2),
    CurrencyInfo("LAK", "Lao Kip", "₭", 2),
    CurrencyInfo("LBP", "Lebanese Pound", "£", 2),
    CurrencyInfo("LKR", "Sri Lankan Rupee", "₨", 2),
    CurrencyInfo("LRD", "Liberian Dollar", "$", 2),
    CurrencyInfo("LSL", "Lesotho Loti", "L", 2),
    CurrencyInfo("MAD", "Moroccan Dirham", "MAD", 2),
    CurrencyInfo("MDL", "Moldovan Leu", "L", 2),
    CurrencyInfo("MGA", "Malagasy Ariary", "Ar", 2),
    CurrencyInfo("MKD", "Macedonian Denar", "ден", 2),
    CurrencyInfo("MMK", "Myanmar Kyat", "K", 2),
    CurrencyInfo("MNT", "Mongolian Tugrik", "₮", 2),
    CurrencyInfo("MOP", "Macanese Pataca", "MOP$", 2),
    CurrencyInfo("MRU", "Mauritanian Ouguiya", "UM", 2),
    CurrencyInfo("MUR", "Mauritian Rupee", "₨", 2),
    CurrencyInfo("MVR", "Maldivian Rufiyaa", "Rf", 2),
    CurrencyInfo("MWK", "Malawian Kwacha", "MK", 2),
    CurrencyInfo("MXN", "Mexican Peso", "$", 2),
    CurrencyInfo("MYR", "Malaysian Ringgit", "RM", 2),
    CurrencyInfo("MZN", "Mozambican Metical", "MT", 2),
    CurrencyInfo("NAD", "Namibian Dollar", "$", 2),
    CurrencyInfo("NGN", "Nigerian Naira", "₦", 2),
    CurrencyInfo("NIO", "Nicaraguan Cordoba", "C$", 2),
    CurrencyInfo("NOK", "Norwegian Krone", "kr", 2, symbol_on_right=True),
    CurrencyInfo("NPR", "Nepalese Rupee", "₨", 2),
    CurrencyInfo("PAB", "Panamanian Balboa", "B/.", 2),
    CurrencyInfo("PEN", "Peruvian Sol", "S/", 2),
    CurrencyInfo("PGK", "Papua New Guinean Kina", "K", 2),
    CurrencyInfo("PHP", "Philippine Peso", "₱", 2),
    CurrencyInfo("PKR", "Pakistani Rupee", "₨", 2),
    CurrencyInfo("PLN", "Polish Zloty", "zł", 2, symbol_on_right=True),
    CurrencyInfo("QAR", "Qatari Riyal", "﷼", 2),
    CurrencyInfo("RON", "Romanian Leu", "lei", 2),
    CurrencyInfo("RSD", "Serbian Dinar", "дин.", 2),
    CurrencyInfo("RUB", "Russian Ruble", "₽", 2),
    CurrencyInfo("SAR", "Saudi Riyal", "﷼", 2),
    CurrencyInfo("SBD", "Solomon Islands Dollar", "$", 2),
    CurrencyInfo("SCR", "Seychellois Rupee", "₨", 2),
    CurrencyInfo("SDG", "Sudanese Pound", "ج.س.", 2),
    CurrencyInfo("SEK", "Swedish Krona", "kr", 2, symbol_on_right=True),
    CurrencyInfo("SGD", "Singapore Dollar", "$", 2),
    CurrencyInfo("SHP", "Saint Helena Pound", "£", 2),
    CurrencyInfo("SLE", "Sierra Leonean Leone", "Le", 2),
    CurrencyInfo("SOS", "Somali Shilling", "S", 2),
    CurrencyInfo("SRD", "Surinamese Dollar", "$", 2),
    CurrencyInfo("SSP", "South Sudanese Pound", "£", 2),
    CurrencyInfo("STN", "Sao Tome and Principe Dobra", "Db", 2),
    CurrencyInfo("SVC", "Salvadoran Colon", "₡", 2),
    CurrencyInfo("SYP", "Syrian Pound", "£", 2),
    CurrencyInfo("SZL", "Swazi Lilangeni", "E", 2),
    CurrencyInfo("THB", "Thai Baht", "฿", 2),
    CurrencyInfo("TJS", "Tajikistani Somoni", "SM", 2),
    CurrencyInfo("TMT", "Turkmenistan Manat", "T", 2),
    CurrencyInfo("TOP", "Tongan Paanga", "T$", 2),
    CurrencyInfo("TRY", "Turkish Lira", "₺", 2),
    CurrencyInfo("TTD", "Trinidad and Tobago Dollar", "TT$", 2),
    CurrencyInfo("TWD", "New Taiwan Dollar", "NT$", 2),
    CurrencyInfo("TZS", "Tanzanian Shilling", "TSh", 2),
    CurrencyInfo("UAH", "Ukrainian Hryvnia", "₴", 2),
    CurrencyInfo("UYU", "Uruguayan Peso", "$U", 2),
    CurrencyInfo("UZS", "Uzbekistani Som", "so'm", 2),
    CurrencyInfo("VES", "Venezuelan Bolivar Soberano", "Bs.S", 2),
    CurrencyInfo("WST", "Samoan Tala", "WS$", 2),
    CurrencyInfo("XCD", "East Caribbean Dollar", "$", 2),
    CurrencyInfo("YER", "Yemeni Rial", "﷼", 2),
    CurrencyInfo("ZAR", "South African Rand", "R", 2),
    CurrencyInfo("ZMW", "Zambian Kwacha", "ZK", 2),
    # Precious metals and special codes
    CurrencyInfo("XAG", "Silver (troy ounce)", "XAG", 0),
    CurrencyInfo("XAU", "Gold (troy ounce)", "XAU", 0),
    CurrencyInfo("XDR", "Special Drawing Rights", "SDR", 0),
    CurrencyInfo("XPD", "Palladium (troy ounce)", "XPD", 0),
    CurrencyInfo("XPT", "Platinum (troy ounce)", "XPT", 0),
    CurrencyInfo("XTS", "Testing Code", "XTS", 0),
    CurrencyInfo("XXX", "No currency", "XXX", 0),
)

BUILTIN_TABLE = CurrencyTable(BUILTIN_CURRENCIES)
