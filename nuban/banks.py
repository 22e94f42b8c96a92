"""
Nigerian Bank Registry Module

Static, read-only tables of Nigerian financial institutions keyed by their
NIBSS institution codes (6 digits) and, for the curated weighted list, the
legacy CBN sort codes (3 digits).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple


class BankProperty(Enum):
    """Properties a bank can be looked up by"""
    SLUG = "SLUG"
    CODE = "CODE"          # New 6 digit NIBSS code
    OLD_CODE = "OLD_CODE"  # Legacy 3 digit CBN code


@dataclass(frozen=True)
class Bank:
    """
    Immutable bank record.
    Several records may share a code (merged banks, issuer variants).
    """
    id: int
    slug: str
    name: str
    code: str
    old_code: Optional[str] = None
    weight: Optional[int] = None

    def __post_init__(self):
        if len(self.code) != 6 or not self.code.isdigit():
            raise ValueError(f"Bank code must be exactly 6 digits, got '{self.code}'")
        if self.old_code is not None and (len(self.old_code) != 3 or not self.old_code.isdigit()):
            raise ValueError(f"Legacy bank code must be exactly 3 digits, got '{self.old_code}'")

    def to_dict(self) -> dict:
        """Serialize for JSON output"""
        data = {
            "id": self.id,
            "slug": self.slug,
            "name": self.name,
            "code": self.code,
        }
        if self.old_code is not None:
            data["old_code"] = self.old_code
        if self.weight is not None:
            data["weight"] = self.weight
        return data


# (slug, name, code) rows of the full NIBSS institution table
_NIBSS_INSTITUTIONS = (
    # Commercial and non-interest banks
    ("sterling_bank", "STERLING BANK", "000001"),
    ("keystone_bank", "KEYSTONE BANK", "000002"),
    ("first_city_monument_bank", "FIRST CITY MONUMENT BANK", "000003"),
    ("united_bank_for_africa", "UNITED BANK FOR AFRICA", "000004"),
    ("diamond_bank", "DIAMOND BANK", "000005"),
    ("jaiz_bank", "JAIZ BANK", "000006"),
    ("fidelity_bank", "FIDELITY BANK", "000007"),
    ("polaris_bank", "POLARIS BANK", "000008"),
    ("citi_bank", "CITI BANK", "000009"),
    ("ecobank", "ECOBANK NIGERIA", "000010"),
    ("unity_bank", "UNITY BANK", "000011"),
    ("stanbic_ibtc_bank", "STANBIC IBTC BANK", "000012"),
    ("guaranty_trust_bank", "GUARANTY TRUST BANK", "000013"),
    ("access_bank", "ACCESS BANK", "000014"),
    ("zenith_bank", "ZENITH BANK", "000015"),
    ("first_bank_of_nigeria", "FIRST BANK OF NIGERIA", "000016"),
    ("wema_bank", "WEMA BANK", "000017"),
    ("union_bank", "UNION BANK", "000018"),
    ("enterprise_bank", "ENTERPRISE BANK", "000019"),
    ("heritage_bank", "HERITAGE BANK", "000020"),
    ("standard_chartered_bank", "STANDARD CHARTERED BANK", "000021"),
    ("suntrust_bank", "SUNTRUST BANK", "000022"),
    ("providus_bank", "PROVIDUS BANK", "000023"),
    ("rand_merchant_bank", "RAND MERCHANT BANK", "000024"),
    ("titan_trust_bank", "TITAN TRUST BANK", "000025"),
    ("taj_bank", "TAJ BANK", "000026"),
    ("globus_bank", "GLOBUS BANK", "000027"),
    ("central_bank_of_nigeria", "CENTRAL BANK OF NIGERIA", "000028"),
    ("lotus_bank", "LOTUS BANK", "000029"),
    ("parallex_bank", "PARALLEX BANK", "000030"),
    ("premium_trust_bank", "PREMIUM TRUST BANK", "000031"),
    ("enaira", "ENAIRA", "000033"),
    ("signature_bank", "SIGNATURE BANK", "000034"),
    ("optimus_bank", "OPTIMUS BANK", "000036"),
    # Merchant banks
    ("coronation_merchant_bank", "CORONATION MERCHANT BANK", "060001"),
    ("fbnquest_merchant_bank", "FBNQUEST MERCHANT BANK", "060002"),
    ("nova_merchant_bank", "NOVA MERCHANT BANK", "060003"),
    ("greenwich_merchant_bank", "GREENWICH MERCHANT BANK", "060004"),
    ("fsdh_merchant_bank", "FSDH MERCHANT BANK", "400001"),
    # Mortgage banks and discount houses
    ("npf_microfinance_bank", "NPF MICROFINANCE BANK", "070001"),
    ("fortis_microfinance_bank", "FORTIS MICROFINANCE BANK", "070002"),
    ("covenant_microfinance_bank", "COVENANT MICROFINANCE BANK", "070006"),
    ("omoluabi_mortgage_bank", "OMOLUABI MORTGAGE BANK", "070007"),
    ("page_financials", "PAGE FINANCIALS", "070008"),
    ("gateway_mortgage_bank", "GATEWAY MORTGAGE BANK", "070009"),
    ("abbey_mortgage_bank", "ABBEY MORTGAGE BANK", "070010"),
    ("refuge_mortgage_bank", "REFUGE MORTGAGE BANK", "070011"),
    ("lagos_building_investment_company", "LAGOS BUILDING INVESTMENT COMPANY", "070012"),
    ("platinum_mortgage_bank", "PLATINUM MORTGAGE BANK", "070013"),
    ("first_generation_mortgage_bank", "FIRST GENERATION MORTGAGE BANK", "070014"),
    ("brent_mortgage_bank", "BRENT MORTGAGE BANK", "070015"),
    ("infinity_trust_mortgage_bank", "INFINITY TRUST MORTGAGE BANK", "070016"),
    ("haggai_mortgage_bank", "HAGGAI MORTGAGE BANK", "070017"),
    ("mayfresh_mortgage_bank", "MAYFRESH MORTGAGE BANK", "070019"),
    ("coop_mortgage_bank", "COOP MORTGAGE BANK", "070021"),
    ("aso_savings_and_loans", "ASO SAVINGS AND LOANS", "090001"),
    ("jubilee_life_mortgage_bank", "JUBILEE LIFE MORTGAGE BANK", "090003"),
    ("parralex_microfinance_bank", "PARRALEX MICROFINANCE BANK", "090004"),
    ("trustbond_mortgage_bank", "TRUSTBOND MORTGAGE BANK", "090005"),
    ("safetrust_mortgage_bank", "SAFETRUST MORTGAGE BANK", "090006"),
    ("fbn_mortgages", "FBN MORTGAGES", "090107"),
    ("new_prudential_bank", "NEW PRUDENTIAL BANK", "090108"),
    # Microfinance banks
    ("ekondo_microfinance_bank", "EKONDO MICROFINANCE BANK", "090097"),
    ("vfd_microfinance_bank", "VFD MICROFINANCE BANK", "090110"),
    ("seed_capital_microfinance_bank", "SEED CAPITAL MICROFINANCE BANK", "090112"),
    ("microvis_microfinance_bank", "MICROVIS MICROFINANCE BANK", "090113"),
    ("empire_trust_microfinance_bank", "EMPIRE TRUST MICROFINANCE BANK", "090114"),
    ("tcf_microfinance_bank", "TCF MICROFINANCE BANK", "090115"),
    ("amml_microfinance_bank", "AMML MICROFINANCE BANK", "090116"),
    ("boctrust_microfinance_bank", "BOCTRUST MICROFINANCE BANK", "090117"),
    ("ibile_microfinance_bank", "IBILE MICROFINANCE BANK", "090118"),
    ("ohafia_microfinance_bank", "OHAFIA MICROFINANCE BANK", "090119"),
    ("wetland_microfinance_bank", "WETLAND MICROFINANCE BANK", "090120"),
    ("hasal_microfinance_bank", "HASAL MICROFINANCE BANK", "090121"),
    ("gowans_microfinance_bank", "GOWANS MICROFINANCE BANK", "090122"),
    ("trustbanc_j6_microfinance_bank", "TRUSTBANC J6 MICROFINANCE BANK", "090123"),
    ("xslnce_microfinance_bank", "XSLNCE MICROFINANCE BANK", "090124"),
    ("regent_microfinance_bank", "REGENT MICROFINANCE BANK", "090125"),
    ("fidfund_microfinance_bank", "FIDFUND MICROFINANCE BANK", "090126"),
    ("bc_kash_microfinance_bank", "BC KASH MICROFINANCE BANK", "090127"),
    ("ndiorah_microfinance_bank", "NDIORAH MICROFINANCE BANK", "090128"),
    ("money_trust_microfinance_bank", "MONEY TRUST MICROFINANCE BANK", "090129"),
    ("consumer_microfinance_bank", "CONSUMER MICROFINANCE BANK", "090130"),
    ("allworkers_microfinance_bank", "ALLWORKERS MICROFINANCE BANK", "090131"),
    ("richway_microfinance_bank", "RICHWAY MICROFINANCE BANK", "090132"),
    ("al_barakah_microfinance_bank", "AL-BARAKAH MICROFINANCE BANK", "090133"),
    ("accion_microfinance_bank", "ACCION MICROFINANCE BANK", "090134"),
    ("personal_trust_microfinance_bank", "PERSONAL TRUST MICROFINANCE BANK", "090135"),
    ("baobab_microfinance_bank", "BAOBAB MICROFINANCE BANK", "090136"),
    ("pecantrust_microfinance_bank", "PECANTRUST MICROFINANCE BANK", "090137"),
    ("royal_exchange_microfinance_bank", "ROYAL EXCHANGE MICROFINANCE BANK", "090138"),
    ("visa_microfinance_bank", "VISA MICROFINANCE BANK", "090139"),
    ("sagamu_microfinance_bank", "SAGAMU MICROFINANCE BANK", "090140"),
    ("chikum_microfinance_bank", "CHIKUM MICROFINANCE BANK", "090141"),
    ("yes_microfinance_bank", "YES MICROFINANCE BANK", "090142"),
    ("apeks_microfinance_bank", "APEKS MICROFINANCE BANK", "090143"),
    ("cit_microfinance_bank", "CIT MICROFINANCE BANK", "090144"),
    ("fullrange_microfinance_bank", "FULLRANGE MICROFINANCE BANK", "090145"),
    ("trident_microfinance_bank", "TRIDENT MICROFINANCE BANK", "090146"),
    ("hackman_microfinance_bank", "HACKMAN MICROFINANCE BANK", "090147"),
    ("bowen_microfinance_bank", "BOWEN MICROFINANCE BANK", "090148"),
    ("irl_microfinance_bank", "IRL MICROFINANCE BANK", "090149"),
    ("virtue_microfinance_bank", "VIRTUE MICROFINANCE BANK", "090150"),
    ("mutual_trust_microfinance_bank", "MUTUAL TRUST MICROFINANCE BANK", "090151"),
    ("nagarta_microfinance_bank", "NAGARTA MICROFINANCE BANK", "090152"),
    ("ffs_microfinance_bank", "FFS MICROFINANCE BANK", "090153"),
    ("cemcs_microfinance_bank", "CEMCS MICROFINANCE BANK", "090154"),
    ("advans_la_fayette_microfinance_bank", "ADVANS LA FAYETTE MICROFINANCE BANK", "090155"),
    ("e_barcs_microfinance_bank", "E-BARCS MICROFINANCE BANK", "090156"),
    ("infinity_microfinance_bank", "INFINITY MICROFINANCE BANK", "090157"),
    ("futo_microfinance_bank", "FUTO MICROFINANCE BANK", "090158"),
    ("credit_afrique_microfinance_bank", "CREDIT AFRIQUE MICROFINANCE BANK", "090159"),
    ("addosser_microfinance_bank", "ADDOSSER MICROFINANCE BANK", "090160"),
    ("okpoga_microfinance_bank", "OKPOGA MICROFINANCE BANK", "090161"),
    ("stanford_microfinance_bank", "STANFORD MICROFINANCE BANK", "090162"),
    ("first_royal_microfinance_bank", "FIRST ROYAL MICROFINANCE BANK", "090164"),
    ("petra_microfinance_bank", "PETRA MICROFINANCE BANK", "090165"),
    ("eso_e_microfinance_bank", "ESO-E MICROFINANCE BANK", "090166"),
    ("daylight_microfinance_bank", "DAYLIGHT MICROFINANCE BANK", "090167"),
    ("gashua_microfinance_bank", "GASHUA MICROFINANCE BANK", "090168"),
    ("alpha_kapital_microfinance_bank", "ALPHA KAPITAL MICROFINANCE BANK", "090169"),
    ("mainstreet_microfinance_bank", "MAINSTREET MICROFINANCE BANK", "090171"),
    ("astrapolaris_microfinance_bank", "ASTRAPOLARIS MICROFINANCE BANK", "090172"),
    ("reliance_microfinance_bank", "RELIANCE MICROFINANCE BANK", "090173"),
    ("malachy_microfinance_bank", "MALACHY MICROFINANCE BANK", "090174"),
    ("rubies_microfinance_bank", "RUBIES MICROFINANCE BANK", "090175"),
    ("bosak_microfinance_bank", "BOSAK MICROFINANCE BANK", "090176"),
    ("lapo_microfinance_bank", "LAPO MICROFINANCE BANK", "090177"),
    ("greenbank_microfinance_bank", "GREENBANK MICROFINANCE BANK", "090178"),
    ("fast_microfinance_bank", "FAST MICROFINANCE BANK", "090179"),
    ("amju_unique_microfinance_bank", "AMJU UNIQUE MICROFINANCE BANK", "090180"),
    ("baines_credit_microfinance_bank", "BAINES CREDIT MICROFINANCE BANK", "090188"),
    ("esan_microfinance_bank", "ESAN MICROFINANCE BANK", "090189"),
    ("mutual_benefits_microfinance_bank", "MUTUAL BENEFITS MICROFINANCE BANK", "090190"),
    ("kcmb_microfinance_bank", "KCMB MICROFINANCE BANK", "090191"),
    ("midland_microfinance_bank", "MIDLAND MICROFINANCE BANK", "090192"),
    ("unical_microfinance_bank", "UNICAL MICROFINANCE BANK", "090193"),
    ("nirsal_microfinance_bank", "NIRSAL MICROFINANCE BANK", "090194"),
    ("grooming_microfinance_bank", "GROOMING MICROFINANCE BANK", "090195"),
    ("pennywise_microfinance_bank", "PENNYWISE MICROFINANCE BANK", "090196"),
    ("abu_microfinance_bank", "ABU MICROFINANCE BANK", "090197"),
    ("renmoney_microfinance_bank", "RENMONEY MICROFINANCE BANK", "090198"),
    ("new_dawn_microfinance_bank", "NEW DAWN MICROFINANCE BANK", "090205"),
    ("unn_microfinance_bank", "UNN MICROFINANCE BANK", "090251"),
    ("yobe_microfinance_bank", "YOBE MICROFINANCE BANK", "090252"),
    ("coalcamp_microfinance_bank", "COALCAMP MICROFINANCE BANK", "090254"),
    ("imo_state_microfinance_bank", "IMO STATE MICROFINANCE BANK", "090258"),
    ("alekun_microfinance_bank", "ALEKUN MICROFINANCE BANK", "090259"),
    ("above_only_microfinance_bank", "ABOVE ONLY MICROFINANCE BANK", "090260"),
    ("quickfund_microfinance_bank", "QUICKFUND MICROFINANCE BANK", "090261"),
    ("stellas_microfinance_bank", "STELLAS MICROFINANCE BANK", "090262"),
    ("navy_microfinance_bank", "NAVY MICROFINANCE BANK", "090263"),
    ("auchi_microfinance_bank", "AUCHI MICROFINANCE BANK", "090264"),
    ("lovonus_microfinance_bank", "LOVONUS MICROFINANCE BANK", "090265"),
    ("uniben_microfinance_bank", "UNIBEN MICROFINANCE BANK", "090266"),
    ("kuda_microfinance_bank", "KUDA MICROFINANCE BANK", "090267"),
    ("adeyemi_college_staff_microfinance_bank", "ADEYEMI COLLEGE STAFF MICROFINANCE BANK", "090268"),
    ("greenville_microfinance_bank", "GREENVILLE MICROFINANCE BANK", "090269"),
    ("ab_microfinance_bank", "AB MICROFINANCE BANK", "090270"),
    ("lavender_microfinance_bank", "LAVENDER MICROFINANCE BANK", "090271"),
    ("olabisi_onabanjo_university_microfinance_bank", "OLABISI ONABANJO UNIVERSITY MICROFINANCE BANK", "090272"),
    ("emeralds_microfinance_bank", "EMERALDS MICROFINANCE BANK", "090273"),
    ("prestige_microfinance_bank", "PRESTIGE MICROFINANCE BANK", "090274"),
    ("trustfund_microfinance_bank", "TRUSTFUND MICROFINANCE BANK", "090276"),
    ("al_hayat_microfinance_bank", "AL-HAYAT MICROFINANCE BANK", "090277"),
    ("glory_microfinance_bank", "GLORY MICROFINANCE BANK", "090278"),
    ("ikire_microfinance_bank", "IKIRE MICROFINANCE BANK", "090279"),
    ("megapraise_microfinance_bank", "MEGAPRAISE MICROFINANCE BANK", "090280"),
    ("mint_finex_microfinance_bank", "MINT-FINEX MICROFINANCE BANK", "090281"),
    ("arise_microfinance_bank", "ARISE MICROFINANCE BANK", "090282"),
    ("nnew_women_microfinance_bank", "NNEW WOMEN MICROFINANCE BANK", "090283"),
    ("first_option_microfinance_bank", "FIRST OPTION MICROFINANCE BANK", "090285"),
    ("safe_haven_microfinance_bank", "SAFE HAVEN MICROFINANCE BANK", "090286"),
    ("assets_matrix_microfinance_bank", "ASSETS MATRIX MICROFINANCE BANK", "090287"),
    ("pillar_microfinance_bank", "PILLAR MICROFINANCE BANK", "090289"),
    ("fct_microfinance_bank", "FCT MICROFINANCE BANK", "090290"),
    ("halacredit_microfinance_bank", "HALACREDIT MICROFINANCE BANK", "090291"),
    ("afekhafe_microfinance_bank", "AFEKHAFE MICROFINANCE BANK", "090292"),
    ("brethren_microfinance_bank", "BRETHREN MICROFINANCE BANK", "090293"),
    ("eagle_flight_microfinance_bank", "EAGLE FLIGHT MICROFINANCE BANK", "090294"),
    ("omiye_microfinance_bank", "OMIYE MICROFINANCE BANK", "090295"),
    ("polyunwana_microfinance_bank", "POLYUNWANA MICROFINANCE BANK", "090296"),
    ("alert_microfinance_bank", "ALERT MICROFINANCE BANK", "090297"),
    ("federal_poly_nasarawa_microfinance_bank", "FEDERAL POLY NASARAWA MICROFINANCE BANK", "090298"),
    ("kontagora_microfinance_bank", "KONTAGORA MICROFINANCE BANK", "090299"),
    ("purplemoney_microfinance_bank", "PURPLEMONEY MICROFINANCE BANK", "090303"),
    ("evangel_microfinance_bank", "EVANGEL MICROFINANCE BANK", "090304"),
    ("sulspap_microfinance_bank", "SULSPAP MICROFINANCE BANK", "090305"),
    ("aramoko_microfinance_bank", "ARAMOKO MICROFINANCE BANK", "090307"),
    ("brightway_microfinance_bank", "BRIGHTWAY MICROFINANCE BANK", "090308"),
    ("edfin_microfinance_bank", "EDFIN MICROFINANCE BANK", "090310"),
    ("u_and_c_microfinance_bank", "U & C MICROFINANCE BANK", "090315"),
    ("patrickgold_microfinance_bank", "PATRICKGOLD MICROFINANCE BANK", "090317"),
    ("federal_university_dutse_microfinance_bank", "FEDERAL UNIVERSITY DUTSE MICROFINANCE BANK", "090318"),
    ("kadpoly_microfinance_bank", "KADPOLY MICROFINANCE BANK", "090320"),
    ("mayfair_microfinance_bank", "MAYFAIR MICROFINANCE BANK", "090321"),
    ("rephidim_microfinance_bank", "REPHIDIM MICROFINANCE BANK", "090322"),
    ("mainland_microfinance_bank", "MAINLAND MICROFINANCE BANK", "090323"),
    ("ikenne_microfinance_bank", "IKENNE MICROFINANCE BANK", "090324"),
    ("sparkle_microfinance_bank", "SPARKLE MICROFINANCE BANK", "090325"),
    ("balogun_gambari_microfinance_bank", "BALOGUN GAMBARI MICROFINANCE BANK", "090326"),
    ("trust_microfinance_bank", "TRUST MICROFINANCE BANK", "090327"),
    ("eyowo", "EYOWO", "090328"),
    ("neptune_microfinance_bank", "NEPTUNE MICROFINANCE BANK", "090329"),
    ("unaab_microfinance_bank", "UNAAB MICROFINANCE BANK", "090331"),
    ("evergreen_microfinance_bank", "EVERGREEN MICROFINANCE BANK", "090332"),
    ("oche_microfinance_bank", "OCHE MICROFINANCE BANK", "090333"),
    ("bipc_microfinance_bank", "BIPC MICROFINANCE BANK", "090336"),
    ("oau_microfinance_bank", "OAU MICROFINANCE BANK", "090345"),
    ("jessefield_microfinance_bank", "JESSEFIELD MICROFINANCE BANK", "090352"),
    ("cashconnect_microfinance_bank", "CASHCONNECT MICROFINANCE BANK", "090360"),
    ("molusi_microfinance_bank", "MOLUSI MICROFINANCE BANK", "090362"),
    ("headway_microfinance_bank", "HEADWAY MICROFINANCE BANK", "090363"),
    ("nuture_microfinance_bank", "NUTURE MICROFINANCE BANK", "090364"),
    ("corestep_microfinance_bank", "CORESTEP MICROFINANCE BANK", "090365"),
    ("firmus_microfinance_bank", "FIRMUS MICROFINANCE BANK", "090366"),
    ("seedvest_microfinance_bank", "SEEDVEST MICROFINANCE BANK", "090369"),
    ("ilisan_microfinance_bank", "ILISAN MICROFINANCE BANK", "090370"),
    ("agosasa_microfinance_bank", "AGOSASA MICROFINANCE BANK", "090371"),
    ("legend_microfinance_bank", "LEGEND MICROFINANCE BANK", "090372"),
    ("tf_microfinance_bank", "TF MICROFINANCE BANK", "090373"),
    ("coastline_microfinance_bank", "COASTLINE MICROFINANCE BANK", "090374"),
    ("apple_microfinance_bank", "APPLE MICROFINANCE BANK", "090376"),
    ("isaleoyo_microfinance_bank", "ISALEOYO MICROFINANCE BANK", "090377"),
    ("new_golden_pastures_microfinance_bank", "NEW GOLDEN PASTURES MICROFINANCE BANK", "090378"),
    ("peniel_microfinance_bank", "PENIEL MICROFINANCE BANK", "090379"),
    ("kredi_money_microfinance_bank", "KREDI MONEY MICROFINANCE BANK", "090380"),
    ("manny_microfinance_bank", "MANNY MICROFINANCE BANK", "090383"),
    ("gti_microfinance_bank", "GTI MICROFINANCE BANK", "090385"),
    ("interland_microfinance_bank", "INTERLAND MICROFINANCE BANK", "090386"),
    ("ek_reliable_microfinance_bank", "EK-RELIABLE MICROFINANCE BANK", "090389"),
    ("davodani_microfinance_bank", "DAVODANI MICROFINANCE BANK", "090391"),
    ("mozfin_microfinance_bank", "MOZFIN MICROFINANCE BANK", "090392"),
    ("bridgeway_microfinance_bank", "BRIDGEWAY MICROFINANCE BANK", "090393"),
    ("amac_microfinance_bank", "AMAC MICROFINANCE BANK", "090394"),
    ("borgu_microfinance_bank", "BORGU MICROFINANCE BANK", "090395"),
    ("oscotech_microfinance_bank", "OSCOTECH MICROFINANCE BANK", "090396"),
    ("federal_polytechnic_nekede_microfinance_bank", "FEDERAL POLYTECHNIC NEKEDE MICROFINANCE BANK", "090398"),
    ("nwannegadi_microfinance_bank", "NWANNEGADI MICROFINANCE BANK", "090399"),
    ("finca_microfinance_bank", "FINCA MICROFINANCE BANK", "090400"),
    ("shepherd_trust_microfinance_bank", "SHEPHERD TRUST MICROFINANCE BANK", "090401"),
    ("uda_microfinance_bank", "UDA MICROFINANCE BANK", "090403"),
    ("olowolagba_microfinance_bank", "OLOWOLAGBA MICROFINANCE BANK", "090404"),
    ("moniepoint_microfinance_bank", "MONIEPOINT MICROFINANCE BANK", "090405"),
    ("business_support_microfinance_bank", "BUSINESS SUPPORT MICROFINANCE BANK", "090406"),
    ("gmb_microfinance_bank", "GMB MICROFINANCE BANK", "090408"),
    ("fcmb_microfinance_bank", "FCMB MICROFINANCE BANK", "090409"),
    ("maritime_microfinance_bank", "MARITIME MICROFINANCE BANK", "090410"),
    ("giginya_microfinance_bank", "GIGINYA MICROFINANCE BANK", "090411"),
    ("preeminent_microfinance_bank", "PREEMINENT MICROFINANCE BANK", "090412"),
    ("benysta_microfinance_bank", "BENYSTA MICROFINANCE BANK", "090413"),
    ("crutech_microfinance_bank", "CRUTECH MICROFINANCE BANK", "090414"),
    ("calabar_microfinance_bank", "CALABAR MICROFINANCE BANK", "090415"),
    ("chibueze_microfinance_bank", "CHIBUEZE MICROFINANCE BANK", "090416"),
    ("imowo_microfinance_bank", "IMOWO MICROFINANCE BANK", "090417"),
    ("highland_microfinance_bank", "HIGHLAND MICROFINANCE BANK", "090418"),
    ("winview_bank", "WINVIEW BANK", "090419"),
    ("letshego_microfinance_bank", "LETSHEGO MICROFINANCE BANK", "090420"),
    ("izon_microfinance_bank", "IZON MICROFINANCE BANK", "090421"),
    ("landgold_microfinance_bank", "LANDGOLD MICROFINANCE BANK", "090422"),
    ("mautech_microfinance_bank", "MAUTECH MICROFINANCE BANK", "090423"),
    ("abucoop_microfinance_bank", "ABUCOOP MICROFINANCE BANK", "090424"),
    ("banex_microfinance_bank", "BANEX MICROFINANCE BANK", "090425"),
    ("tangerine_money_microfinance_bank", "TANGERINE MONEY MICROFINANCE BANK", "090426"),
    ("ebsu_microfinance_bank", "EBSU MICROFINANCE BANK", "090427"),
    ("ishie_microfinance_bank", "ISHIE MICROFINANCE BANK", "090428"),
    ("crossriver_microfinance_bank", "CROSSRIVER MICROFINANCE BANK", "090429"),
    ("ilora_microfinance_bank", "ILORA MICROFINANCE BANK", "090430"),
    ("bluewhales_microfinance_bank", "BLUEWHALES MICROFINANCE BANK", "090431"),
    ("memphis_microfinance_bank", "MEMPHIS MICROFINANCE BANK", "090432"),
    ("rigo_microfinance_bank", "RIGO MICROFINANCE BANK", "090433"),
    ("insight_microfinance_bank", "INSIGHT MICROFINANCE BANK", "090434"),
    ("links_microfinance_bank", "LINKS MICROFINANCE BANK", "090435"),
    ("spectrum_microfinance_bank", "SPECTRUM MICROFINANCE BANK", "090436"),
    ("oakland_microfinance_bank", "OAKLAND MICROFINANCE BANK", "090437"),
    ("futminna_microfinance_bank", "FUTMINNA MICROFINANCE BANK", "090438"),
    ("ibeto_microfinance_bank", "IBETO MICROFINANCE BANK", "090439"),
    ("cherish_microfinance_bank", "CHERISH MICROFINANCE BANK", "090440"),
    ("medef_microfinance_bank", "MEDEF MICROFINANCE BANK", "090441"),
    ("rima_microfinance_bank", "RIMA MICROFINANCE BANK", "090443"),
    ("boi_microfinance_bank", "BOI MICROFINANCE BANK", "090444"),
    ("capstone_microfinance_bank", "CAPSTONE MICROFINANCE BANK", "090445"),
    ("support_microfinance_bank", "SUPPORT MICROFINANCE BANK", "090446"),
    ("moyofade_microfinance_bank", "MOYOFADE MICROFINANCE BANK", "090448"),
    ("rex_microfinance_bank", "REX MICROFINANCE BANK", "090449"),
    ("kwasu_microfinance_bank", "KWASU MICROFINANCE BANK", "090450"),
    ("atbu_microfinance_bank", "ATBU MICROFINANCE BANK", "090451"),
    ("unilag_microfinance_bank", "UNILAG MICROFINANCE BANK", "090452"),
    ("uzondu_microfinance_bank", "UZONDU MICROFINANCE BANK", "090453"),
    ("borstal_microfinance_bank", "BORSTAL MICROFINANCE BANK", "090454"),
    ("mkobo_microfinance_bank", "MKOBO MICROFINANCE BANK", "090455"),
    ("ospoly_microfinance_bank", "OSPOLY MICROFINANCE BANK", "090456"),
    ("nice_microfinance_bank", "NICE MICROFINANCE BANK", "090459"),
    ("oluyole_microfinance_bank", "OLUYOLE MICROFINANCE BANK", "090460"),
    ("uniibadan_microfinance_bank", "UNIIBADAN MICROFINANCE BANK", "090461"),
    ("monarch_microfinance_bank", "MONARCH MICROFINANCE BANK", "090462"),
    ("rehoboth_microfinance_bank", "REHOBOTH MICROFINANCE BANK", "090463"),
    ("unimaid_microfinance_bank", "UNIMAID MICROFINANCE BANK", "090464"),
    ("maintrust_microfinance_bank", "MAINTRUST MICROFINANCE BANK", "090465"),
    ("yct_microfinance_bank", "YCT MICROFINANCE BANK", "090466"),
    ("good_neighbours_microfinance_bank", "GOOD NEIGHBOURS MICROFINANCE BANK", "090467"),
    ("olofin_owena_microfinance_bank", "OLOFIN OWENA MICROFINANCE BANK", "090468"),
    ("aniocha_microfinance_bank", "ANIOCHA MICROFINANCE BANK", "090469"),
    ("dot_microfinance_bank", "DOT MICROFINANCE BANK", "090470"),
    ("oluchukwu_microfinance_bank", "OLUCHUKWU MICROFINANCE BANK", "090471"),
    ("caretaker_microfinance_bank", "CARETAKER MICROFINANCE BANK", "090472"),
    ("assets_microfinance_bank", "ASSETS MICROFINANCE BANK", "090473"),
    ("verdant_microfinance_bank", "VERDANT MICROFINANCE BANK", "090474"),
    ("giant_stride_microfinance_bank", "GIANT STRIDE MICROFINANCE BANK", "090475"),
    ("anchorage_microfinance_bank", "ANCHORAGE MICROFINANCE BANK", "090476"),
    ("light_microfinance_bank", "LIGHT MICROFINANCE BANK", "090477"),
    ("avuenegbe_microfinance_bank", "AVUENEGBE MICROFINANCE BANK", "090478"),
    ("first_heritage_microfinance_bank", "FIRST HERITAGE MICROFINANCE BANK", "090479"),
    ("kolomoni_microfinance_bank", "KOLOMONI MICROFINANCE BANK", "090480"),
    ("prisco_microfinance_bank", "PRISCO MICROFINANCE BANK", "090481"),
    ("fedeth_microfinance_bank", "FEDETH MICROFINANCE BANK", "090482"),
    ("ada_microfinance_bank", "ADA MICROFINANCE BANK", "090483"),
    ("garki_microfinance_bank", "GARKI MICROFINANCE BANK", "090484"),
    ("safegate_microfinance_bank", "SAFEGATE MICROFINANCE BANK", "090485"),
    ("fortress_microfinance_bank", "FORTRESS MICROFINANCE BANK", "090486"),
    ("kingdom_college_microfinance_bank", "KINGDOM COLLEGE MICROFINANCE BANK", "090487"),
    ("ibu_aje_microfinance_bank", "IBU-AJE MICROFINANCE BANK", "090488"),
    ("alvana_microfinance_bank", "ALVANA MICROFINANCE BANK", "090489"),
    ("chukwunenye_microfinance_bank", "CHUKWUNENYE MICROFINANCE BANK", "090490"),
    ("nsuk_microfinance_bank", "NSUK MICROFINANCE BANK", "090491"),
    ("oraukwu_microfinance_bank", "ORAUKWU MICROFINANCE BANK", "090492"),
    ("iperu_microfinance_bank", "IPERU MICROFINANCE BANK", "090493"),
    ("boji_boji_microfinance_bank", "BOJI BOJI MICROFINANCE BANK", "090494"),
    ("prospa_capital_microfinance_bank", "PROSPA CAPITAL MICROFINANCE BANK", "090495"),
    ("radalpha_microfinance_bank", "RADALPHA MICROFINANCE BANK", "090496"),
    ("palmcoast_microfinance_bank", "PALMCOAST MICROFINANCE BANK", "090497"),
    ("catland_microfinance_bank", "CATLAND MICROFINANCE BANK", "090498"),
    ("pristine_divitis_microfinance_bank", "PRISTINE DIVITIS MICROFINANCE BANK", "090499"),
    ("gwong_microfinance_bank", "GWONG MICROFINANCE BANK", "090500"),
    ("boromu_microfinance_bank", "BOROMU MICROFINANCE BANK", "090501"),
    ("shalom_microfinance_bank", "SHALOM MICROFINANCE BANK", "090502"),
    ("projects_microfinance_bank", "PROJECTS MICROFINANCE BANK", "090503"),
    ("zikora_microfinance_bank", "ZIKORA MICROFINANCE BANK", "090504"),
    ("nigerian_prisons_microfinance_bank", "NIGERIAN PRISONS MICROFINANCE BANK", "090505"),
    ("solid_allianze_microfinance_bank", "SOLID ALLIANZE MICROFINANCE BANK", "090506"),
    ("fims_microfinance_bank", "FIMS MICROFINANCE BANK", "090507"),
    ("borno_renaissance_microfinance_bank", "BORNO RENAISSANCE MICROFINANCE BANK", "090508"),
    ("capitalmetriq_swift_microfinance_bank", "CAPITALMETRIQ SWIFT MICROFINANCE BANK", "090509"),
    ("umunnachi_microfinance_bank", "UMUNNACHI MICROFINANCE BANK", "090510"),
    ("cloverleaf_microfinance_bank", "CLOVERLEAF MICROFINANCE BANK", "090511"),
    ("bubayero_microfinance_bank", "BUBAYERO MICROFINANCE BANK", "090512"),
    ("seap_microfinance_bank", "SEAP MICROFINANCE BANK", "090513"),
    ("umuchinemere_procredit_microfinance_bank", "UMUCHINEMERE PROCREDIT MICROFINANCE BANK", "090514"),
    ("rima_growth_pathway_microfinance_bank", "RIMA GROWTH PATHWAY MICROFINANCE BANK", "090515"),
    ("numo_microfinance_bank", "NUMO MICROFINANCE BANK", "090516"),
    ("uhuru_microfinance_bank", "UHURU MICROFINANCE BANK", "090517"),
    ("afemai_microfinance_bank", "AFEMAI MICROFINANCE BANK", "090518"),
    ("iboma_fadama_microfinance_bank", "IBOMA FADAMA MICROFINANCE BANK", "090519"),
    ("ic_global_microfinance_bank", "IC GLOBAL MICROFINANCE BANK", "090520"),
    ("foresight_microfinance_bank", "FORESIGHT MICROFINANCE BANK", "090521"),
    ("chase_microfinance_bank", "CHASE MICROFINANCE BANK", "090523"),
    ("solidrock_microfinance_bank", "SOLIDROCK MICROFINANCE BANK", "090524"),
    ("triple_a_microfinance_bank", "TRIPLE A MICROFINANCE BANK", "090525"),
    ("crescent_microfinance_bank", "CRESCENT MICROFINANCE BANK", "090526"),
    ("ojokoro_microfinance_bank", "OJOKORO MICROFINANCE BANK", "090527"),
    ("mgbidi_microfinance_bank", "MGBIDI MICROFINANCE BANK", "090528"),
    ("ampersand_microfinance_bank", "AMPERSAND MICROFINANCE BANK", "090529"),
    ("confidence_microfinance_bank", "CONFIDENCE MICROFINANCE BANK", "090530"),
    ("aku_microfinance_bank", "AKU MICROFINANCE BANK", "090531"),
    ("ibolo_microfinance_bank", "IBOLO MICROFINANCE BANK", "090532"),
    ("polybadan_microfinance_bank", "POLYBADAN MICROFINANCE BANK", "090534"),
    ("nkpolu_ust_microfinance_bank", "NKPOLU-UST MICROFINANCE BANK", "090535"),
    ("ikoyi_osun_microfinance_bank", "IKOYI-OSUN MICROFINANCE BANK", "090536"),
    ("lobrem_microfinance_bank", "LOBREM MICROFINANCE BANK", "090537"),
    ("blue_investments_microfinance_bank", "BLUE INVESTMENTS MICROFINANCE BANK", "090538"),
    ("enrich_microfinance_bank", "ENRICH MICROFINANCE BANK", "090539"),
    ("aztec_microfinance_bank", "AZTEC MICROFINANCE BANK", "090540"),
    ("excellent_microfinance_bank", "EXCELLENT MICROFINANCE BANK", "090541"),
    ("otuo_microfinance_bank", "OTUO MICROFINANCE BANK", "090542"),
    ("iwoama_microfinance_bank", "IWOAMA MICROFINANCE BANK", "090543"),
    ("aspire_microfinance_bank", "ASPIRE MICROFINANCE BANK", "090544"),
    ("abulesoro_microfinance_bank", "ABULESORO MICROFINANCE BANK", "090545"),
    ("ijebu_ife_microfinance_bank", "IJEBU-IFE MICROFINANCE BANK", "090546"),
    ("rockshield_microfinance_bank", "ROCKSHIELD MICROFINANCE BANK", "090547"),
    ("ally_microfinance_bank", "ALLY MICROFINANCE BANK", "090548"),
    ("kc_microfinance_bank", "KC MICROFINANCE BANK", "090549"),
    ("green_energy_microfinance_bank", "GREEN ENERGY MICROFINANCE BANK", "090550"),
    ("fairmoney_microfinance_bank", "FAIRMONEY MICROFINANCE BANK", "090551"),
    ("ekimogun_microfinance_bank", "EKIMOGUN MICROFINANCE BANK", "090552"),
    ("consistent_trust_microfinance_bank", "CONSISTENT TRUST MICROFINANCE BANK", "090553"),
    ("kayvee_microfinance_bank", "KAYVEE MICROFINANCE BANK", "090554"),
    ("bishopgate_microfinance_bank", "BISHOPGATE MICROFINANCE BANK", "090555"),
    ("egwafin_microfinance_bank", "EGWAFIN MICROFINANCE BANK", "090556"),
    ("lifegate_microfinance_bank", "LIFEGATE MICROFINANCE BANK", "090557"),
    ("shongom_microfinance_bank", "SHONGOM MICROFINANCE BANK", "090558"),
    ("shield_microfinance_bank", "SHIELD MICROFINANCE BANK", "090559"),
    ("tanadi_microfinance_bank", "TANADI MICROFINANCE BANK", "090560"),
    ("akuchukwu_microfinance_bank", "AKUCHUKWU MICROFINANCE BANK", "090561"),
    ("cedar_microfinance_bank", "CEDAR MICROFINANCE BANK", "090562"),
    ("balera_microfinance_bank", "BALERA MICROFINANCE BANK", "090563"),
    ("supreme_microfinance_bank", "SUPREME MICROFINANCE BANK", "090564"),
    ("oke_aro_oredegbe_microfinance_bank", "OKE-ARO OREDEGBE MICROFINANCE BANK", "090565"),
    ("okuku_microfinance_bank", "OKUKU MICROFINANCE BANK", "090566"),
    ("orokam_microfinance_bank", "OROKAM MICROFINANCE BANK", "090567"),
    ("broadview_microfinance_bank", "BROADVIEW MICROFINANCE BANK", "090568"),
    ("qube_microfinance_bank", "QUBE MICROFINANCE BANK", "090569"),
    ("iyamoye_microfinance_bank", "IYAMOYE MICROFINANCE BANK", "090570"),
    ("ilaro_poly_microfinance_bank", "ILARO POLY MICROFINANCE BANK", "090571"),
    ("ewt_microfinance_bank", "EWT MICROFINANCE BANK", "090572"),
    ("snow_microfinance_bank", "SNOW MICROFINANCE BANK", "090573"),
    ("goldman_microfinance_bank", "GOLDMAN MICROFINANCE BANK", "090574"),
    ("firstmidas_microfinance_bank", "FIRSTMIDAS MICROFINANCE BANK", "090575"),
    ("octopus_microfinance_bank", "OCTOPUS MICROFINANCE BANK", "090576"),
    ("iwade_microfinance_bank", "IWADE MICROFINANCE BANK", "090578"),
    ("gbede_microfinance_bank", "GBEDE MICROFINANCE BANK", "090579"),
    ("otech_microfinance_bank", "OTECH MICROFINANCE BANK", "090580"),
    ("bancorp_microfinance_bank", "BANCORP MICROFINANCE BANK", "090581"),
    ("stateside_microfinance_bank", "STATESIDE MICROFINANCE BANK", "090583"),
    ("island_microfinance_bank", "ISLAND MICROFINANCE BANK", "090584"),
    # Mobile money operators and switches
    ("fet", "FET", "100001"),
    ("paga", "PAGA", "100002"),
    ("parkway_readycash", "PARKWAY-READYCASH", "100003"),
    ("opay", "OPAY", "100004"),
    ("cellulant", "CELLULANT", "100005"),
    ("etranzact", "ETRANZACT", "100006"),
    ("stanbic_ibtc_ease_wallet", "STANBIC IBTC @EASE WALLET", "100007"),
    ("ecobank_xpress_account", "ECOBANK XPRESS ACCOUNT", "100008"),
    ("gt_mobile", "GT MOBILE", "100009"),
    ("teasy_mobile", "TEASY MOBILE", "100010"),
    ("mkudi", "MKUDI", "100011"),
    ("vt_networks", "VT NETWORKS", "100012"),
    ("access_mobile", "ACCESS MOBILE", "100013"),
    ("fbn_mobile", "FBN MOBILE", "100014"),
    ("kegow", "KEGOW", "100015"),
    ("fortis_mobile", "FORTIS MOBILE", "100016"),
    ("hedonmark", "HEDONMARK", "100017"),
    ("zenith_mobile", "ZENITH MOBILE", "100018"),
    ("fidelity_mobile", "FIDELITY MOBILE", "100019"),
    ("moneybox", "MONEYBOX", "100020"),
    ("eartholeum", "EARTHOLEUM", "100021"),
    ("gomoney", "GOMONEY", "100022"),
    ("tagpay", "TAGPAY", "100023"),
    ("imperial_homes_mortgage_bank", "IMPERIAL HOMES MORTGAGE BANK", "100024"),
    ("zinternet_nigeria", "ZINTERNET NIGERIA", "100025"),
    ("one_finance", "ONE FINANCE", "100026"),
    ("intellifin", "INTELLIFIN", "100027"),
    ("ag_mortgage_bank", "AG MORTGAGE BANK", "100028"),
    ("innovectives_kesh", "INNOVECTIVES KESH", "100029"),
    ("ecomobile", "ECOMOBILE", "100030"),
    ("fcmb_easy_account", "FCMB EASY ACCOUNT", "100031"),
    ("nownow_digital_systems", "NOWNOW DIGITAL SYSTEMS", "100032"),
    ("palmpay", "PALMPAY", "100033"),
    ("payattitude_online", "PAYATTITUDE ONLINE", "110001"),
    ("flutterwave_technology_solutions", "FLUTTERWAVE TECHNOLOGY SOLUTIONS", "110002"),
    ("interswitch", "INTERSWITCH", "110003"),
    ("first_apple", "FIRST APPLE", "110004"),
    ("3line_card_management", "3LINE CARD MANAGEMENT", "110005"),
    ("paystack_payments", "PAYSTACK PAYMENTS", "110006"),
    # Payment service banks
    ("9_payment_service_bank", "9 PAYMENT SERVICE BANK", "120001"),
    ("hope_psb", "HOPE PSB", "120002"),
    ("momo_psb", "MOMO PSB", "120003"),
    ("smartcash_psb", "SMARTCASH PSB", "120004"),
    ("nip_virtual_bank", "NIP VIRTUAL BANK", "999999"),
)

# (slug, name, code, old_code) rows of the curated list
_WEIGHTED_INSTITUTIONS = (
    ("access_bank", "ACCESS BANK", "000014", "044"),
    ("access_diamond_bank", "ACCESS(DIAMOND) BANK", "000014", "063"),
    ("citi_bank", "CITI BANK", "000009", "023"),
    ("ecobank", "ECOBANK NIGERIA", "000010", "050"),
    ("enterprise_bank", "ENTERPRISE BANK", "000019", "084"),
    ("fidelity_bank", "FIDELITY BANK", "000007", "070"),
    ("first_bank_of_nigeria", "FIRST BANK OF NIGERIA", "000016", "011"),
    ("first_city_monument_bank", "FIRST CITY MONUMENT BANK", "000003", "214"),
    ("globus_bank", "GLOBUS BANK", "000027", "103"),
    ("guarantee_trust_bank", "GUARANTY TRUST BANK", "000013", "058"),
    ("heritage_bank", "HERITAGE BANK", "000020", "030"),
    ("jaiz_bank", "JAIZ BANK", "000006", "301"),
    ("keystone_bank", "KEYSTONE BANK", "000002", "082"),
    ("lotus_bank", "LOTUS BANK", "000029", "303"),
    ("mainstreet_microfinance_bank", "MAINSTREET MICROFINANCE BANK", "090171", "014"),
    ("optimus_bank", "OPTIMUS BANK", "000036", "107"),
    ("parallex_bank", "PARALLEX BANK", "000030", "104"),
    ("polaris_bank", "POLARIS BANK", "000008", "076"),
    ("premium_trust_bank", "PREMIUM TRUST BANK", "000031", "105"),
    ("providus_bank", "PROVIDUS BANK", "000023", "101"),
    ("signature_bank", "SIGNATURE BANK", "000034", "106"),
    ("stanbic_ibtc_bank", "STANBIC IBTC BANK", "000012", "221"),
    ("standard_chartered_bank", "STANDARD CHARTERED BANK", "000021", "068"),
    ("sterling_bank", "STERLING BANK", "000001", "232"),
    ("suntrust_bank", "SUNTRUST", "000022", "100"),
    ("titan_trust_bank", "TITAN TRUST BANK", "000025", "102"),
    ("union_bank", "UNION BANK", "000018", "032"),
    ("united_bank_for_africa", "UNITED BANK FOR AFRICA", "000004", "033"),
    ("unity_bank", "UNITY BANK", "000011", "215"),
    ("wema_bank", "WEMA BANK", "000017", "035"),
    ("zenith_bank", "ZENITH BANK", "000015", "057"),
)


NIGERIAN_BANKS: Tuple[Bank, ...] = tuple(
    Bank(id=index, slug=slug, name=name, code=code)
    for index, (slug, name, code) in enumerate(_NIBSS_INSTITUTIONS, start=1)
)

WEIGHTED_NIGERIAN_BANKS: Tuple[Bank, ...] = tuple(
    Bank(id=index, slug=slug, name=name, code=code, old_code=old_code, weight=1)
    for index, (slug, name, code, old_code) in enumerate(_WEIGHTED_INSTITUTIONS, start=1)
)


def _property_value(bank: Bank, prop: BankProperty) -> Optional[str]:
    if prop == BankProperty.SLUG:
        return bank.slug
    elif prop == BankProperty.CODE:
        return bank.code
    elif prop == BankProperty.OLD_CODE:
        return bank.old_code
    raise ValueError(f"Unsupported bank property: {prop}")


def get_bank(value: str, prop: BankProperty,
             banks: Optional[Sequence[Bank]] = None) -> Optional[Bank]:
    """
    Find the first bank whose property matches value

    Legacy code lookups default to the weighted list, since only the
    curated list carries 3 digit codes. Slug and code lookups default
    to the full list. An explicit banks sequence is searched as-is.

    Args:
        value: Slug, 6 digit code or 3 digit legacy code
        prop: Property to match against
        banks: Optional sequence of banks to search

    Returns:
        Matching Bank, or None if not found
    """
    if banks is None:
        banks = WEIGHTED_NIGERIAN_BANKS if prop == BankProperty.OLD_CODE else NIGERIAN_BANKS

    for bank in banks:
        if _property_value(bank, prop) == value:
            return bank
    return None
