"""
Built-in City -> State table
Used when the external reference table is missing or malformed.
Coverage is best-effort: major cities, district towns and airport cities.
"""
from typing import Dict

# State (lowercase) -> cities (lowercase)
DEFAULT_STATE_CITIES = {
    "andhra pradesh": [
        "amaravati", "visakhapatnam", "vijayawada", "guntur", "nellore", "kurnool",
        "rajahmundry", "tirupati", "kakinada", "kadapa", "anantapur", "eluru",
        "ongole", "kadiri", "hindupur", "proddatur", "bhimavaram", "gudivada",
        "rajampet", "tadepalligudem", "srikakulam", "anakapalle", "nandyal",
        "adoni", "chittoor", "machilipatnam", "bapatla", "nagari", "narsapur",
        "tanuku", "yemmiganur", "sullurpeta", "palacole", "parvathipuram",
        "ramachandrapuram", "samalkot", "sattenapalle", "tadpatri", "tiruvuru",
        "venkatagiri", "puttaparthi",
    ],
    "arunachal pradesh": [
        "itanagar", "naharlagun", "pasighat", "tawang", "bomdila", "tezu",
        "khonsa", "anini", "dambuk", "miao", "roing", "sagalee", "seppa",
        "bhalukpong", "changlang", "hawai", "jairampur", "koloriang", "namsai",
        "pangin", "ziro", "along", "daporijo",
    ],
    "assam": [
        "dispur", "guwahati", "dibrugarh", "silchar", "tezpur", "jorhat",
        "nagaon", "tinsukia", "dhubri", "diphu", "north lakhimpur", "barpeta",
        "lakhimpur", "sibsagar", "goalpara", "hailakandi", "dhemaji", "teok",
        "lumding", "mangaldoi", "marigaon", "sadiya", "udalguri", "badarpur",
        "bilasipara", "morigaon", "sorbhog", "tangla", "bongaigaon", "karimganj",
    ],
    "bihar": [
        "patna", "gaya", "bhagalpur", "muzaffarpur", "darbhanga", "begusarai",
        "chapra", "katihar", "munger", "purnia", "saharsa", "hajipur", "sasaram",
        "dehri", "nawada", "jamalpur", "sitamarhi", "danapur", "madhubani",
        "siwan", "chhapra", "araria", "kishanganj", "madhepura", "arrah",
        "mokama", "sultanganj", "bodh gaya", "raxaul",
    ],
    "chhattisgarh": [
        "raipur", "bhilai", "durg", "korba", "bilaspur", "raigarh", "jagdalpur",
        "rajnandgaon", "ambikapur", "dhamtari", "chirmiri", "bhatapara", "sakti",
        "jashpur", "mahasamund", "dantewada", "narayanpur", "kanker", "kondagaon",
        "sukma", "balod", "baloda bazar", "bemetara", "gariaband", "kabirdham",
    ],
    "goa": [
        "panaji", "margao", "mapusa", "mormugao", "vasco da gama", "bicholim",
        "ponda", "sanguem", "canacona", "quepem", "salcette", "cortalim",
        "cuncolim", "goa velha", "majorda", "mopa",
    ],
    "gujarat": [
        "gandhinagar", "ahmedabad", "surat", "vadodara", "rajkot", "bhavnagar",
        "jamnagar", "nadiad", "veraval", "gandhidham", "bharuch", "junagadh",
        "bhuj", "navsari", "botad", "dahod", "dwarka", "kandla", "porbandar",
        "kheda", "mehsana", "morbi", "anand", "patan", "surendranagar", "valsad",
        "keshod", "amreli",
    ],
    "haryana": [
        "faridabad", "gurgaon", "hisar", "rohtak", "panipat", "karnal", "sonipat",
        "yamunanagar", "bhiwani", "sirsa", "bahadurgarh", "jind", "thanesar",
        "kurukshetra", "kaithal", "palwal", "bawal", "charkhi dadri", "fatehabad",
        "gohana", "jagadhri", "kalka", "meham", "nuh", "narwana", "narnaul",
        "panchkula", "rewari", "ambala",
    ],
    "himachal pradesh": [
        "shimla", "mandi", "solan", "nahan", "kullu", "bhuntar", "manali",
        "dharamshala", "gaggal", "palampur", "baddi", "una", "chamba", "kangra",
        "kinnaur", "hamirpur", "keylong",
    ],
    "jharkhand": [
        "ranchi", "jamshedpur", "dhanbad", "bokaro", "hazaribagh", "giridih",
        "deoghar", "chaibasa", "chatra", "dumka", "gumla", "pakur", "sahebganj",
        "simdega", "daltonganj", "latehar", "khunti", "lohardaga", "madhupur",
        "mihijam",
    ],
    "karnataka": [
        "bengaluru", "mysore", "mangalore", "hubli", "dharwad", "davanagere",
        "belgaum", "gulbarga", "bellary", "bijapur", "vijayapura", "shimoga",
        "tumkur", "mandya", "gadag", "raichur", "hassan", "chitradurga", "kolar",
        "udupi", "hospet", "bhatkal", "gokak", "madikeri", "ranibennur",
        "tarikere", "bidar", "karwar",
    ],
    "kerala": [
        "thiruvananthapuram", "kochi", "kollam", "kottayam", "palakkad",
        "alappuzha", "thrissur", "kannur", "kozhikode", "malappuram", "wayanad",
        "kasaragod", "pathanamthitta", "idukki", "munnar", "varkala",
    ],
    "madhya pradesh": [
        "bhopal", "indore", "jabalpur", "gwalior", "ujjain", "sagar", "dewas",
        "satna", "rewa", "morena", "hoshangabad", "bhind", "damoh", "khargone",
        "mandsaur", "neemuch", "shahdol", "chhindwara", "guna", "tikamgarh",
        "sehore", "ashoknagar", "shajapur", "seoni", "khajuraho", "katni",
    ],
    "maharashtra": [
        "mumbai", "pune", "nagpur", "nashik", "aurangabad", "solapur", "thane",
        "navi mumbai", "jalgaon", "kolhapur", "amravati", "latur", "sangli",
        "nanded", "satara", "akola", "parbhani", "malegaon", "osmanabad",
        "nandurbar", "ahmednagar", "chandrapur", "dhule", "gondia", "hinganghat",
        "jalna", "khamgaon", "khopoli", "shirdi", "ratnagiri", "sindhudurg",
    ],
    "manipur": [
        "imphal", "thoubal", "bishnupur", "churachandpur", "senapati",
        "tamenglong", "ukhrul", "kakching", "kangpokpi", "noney", "tengnoupal",
    ],
    "meghalaya": [
        "shillong", "tura", "jowai", "nongstoin", "baghmara", "resubelpara",
        "williamnagar", "cherrapunji", "mairang", "mawkyrwat", "sohra", "nongpoh",
        "umroi",
    ],
    "mizoram": [
        "aizawl", "lunglei", "champhai", "kolasib", "serchhip", "mamit", "saiha",
        "lengpui", "thenzawl",
    ],
    "nagaland": [
        "kohima", "dimapur", "mokokchung", "tuensang", "wokha", "zunheboto",
        "mon", "phek", "kiphire", "longleng",
    ],
    "odisha": [
        "bhubaneswar", "cuttack", "rourkela", "sambalpur", "berhampur", "puri",
        "balasore", "baleshwar", "bhadrak", "baripada", "kendrapara", "anugul",
        "bargarh", "balangir", "bolangir", "boudh", "bhawanipatna", "dhenkanal",
        "jagatsinghpur", "jajpur", "jharsuguda", "kendujhar", "koraput",
        "malkangiri", "nabarangpur", "nayagarh", "nuapada", "phulbani",
        "rayagada", "sundargarh",
    ],
    "punjab": [
        "chandigarh", "ludhiana", "amritsar", "jalandhar", "patiala", "bathinda",
        "hoshiarpur", "moga", "mohali", "firozpur", "malerkotla", "gobindgarh",
        "khanna", "fatehgarh sahib", "sangrur", "sunam", "dhuri", "zira",
        "fazilka", "kharar", "rajpura", "sirhind", "barnala", "jagraon",
        "kotkapura", "muktsar", "phagwara", "gurdaspur", "kapurthala", "rupnagar",
        "pathankot", "adampur", "sas nagar", "sri muktsar sahib",
    ],
    "rajasthan": [
        "jaipur", "jodhpur", "kota", "bikaner", "ajmer", "kishangarh", "bhilwara",
        "alwar", "sikar", "sawai madhopur", "pali", "ganganagar", "sri ganganagar",
        "bharatpur", "barmer", "tonk", "chittorgarh", "dungarpur", "banswara",
        "dhaulpur", "dholpur", "karauli", "rajsamand", "udaipur", "hanumangarh",
        "jaisalmer", "jalore", "jhalawar", "jhunjhunu", "nagaur", "sirohi",
        "mount abu",
    ],
    "sikkim": [
        "gangtok", "namchi", "gyalshing", "mangan", "soreng", "rhenock", "pakyong",
    ],
    "tamil nadu": [
        "chennai", "coimbatore", "madurai", "tiruchirappalli", "salem",
        "tirunelveli", "tiruppur", "vellore", "thoothukudi", "erode",
        "tiruvannamalai", "pollachi", "rajapalayam", "ramanathapuram",
        "kanchipuram", "nagercoil", "dindigul", "karur", "nagapattinam",
        "kovilpatti", "karaikudi", "vaniyambadi", "sivakasi", "tiruchengode",
        "tirupattur", "ranipet", "tindivanam", "udumalaipettai", "virudhachalam",
        "virudhunagar", "ooty", "hosur", "thanjavur",
    ],
    "telangana": [
        "hyderabad", "warangal", "nizamabad", "karimnagar", "ramagundam",
        "khammam", "mahbubnagar", "nalgonda", "suryapet", "miryalaguda",
        "siddipet", "adilabad", "sangareddy", "sircilla", "peddapalli", "bodhan",
        "mancherial", "kamareddy", "nirmal", "jagtial", "shamshabad",
    ],
    "tripura": [
        "agartala", "dharmanagar", "kailasahar", "belonia", "ampinagar",
        "khowai", "kamalpur", "teliamura",
    ],
    "uttar pradesh": [
        "lucknow", "kanpur", "agra", "varanasi", "meerut", "allahabad",
        "gorakhpur", "noida", "greater noida", "ghaziabad", "bareilly", "aligarh",
        "saharanpur", "mathura", "firozabad", "muzaffarnagar", "moradabad",
        "ayodhya", "jhansi", "kushinagar", "hindon",
    ],
    "uttarakhand": [
        "dehradun", "haridwar", "hardwar", "rishikesh", "haldwani", "kathgodam",
        "kashipur", "rudrapur", "khatima", "sitarganj", "jaspur", "pauri",
        "chakrata", "chamoli", "devprayag", "dwarahat", "gairsain", "gangotri",
        "gauchar", "gaurikund", "guptkashi", "harsil", "joshimath", "kalsi",
        "karnaprayag", "kotdwar", "laksar", "lalkuan", "lansdowne", "manglaur",
        "mukteshwar", "nainital", "nandaprayag", "narendranagar", "pithoragarh",
        "purola", "ranikhet", "roorkee", "rudraprayag", "uttarkashi", "vikasnagar",
        "yamunotri", "jolly grant", "pantnagar",
    ],
    "west bengal": [
        "kolkata", "siliguri", "durgapur", "asansol", "malda", "raiganj",
        "kharagpur", "jalpaiguri", "cooch behar", "bankura", "darjeeling",
        "krishnanagar", "berhampore", "bally", "budge budge", "dhulian",
        "dankuni", "haldia", "kulti", "kamarhati", "medinipur", "nabadwip",
        "purulia", "shantipur", "suri", "tamluk", "alipurduar", "howrah",
    ],
    "delhi": [
        "delhi", "north delhi", "south delhi", "east delhi", "west delhi",
        "central delhi", "north west delhi", "south west delhi",
        "north east delhi", "shahdara", "palam", "rohini", "pitampura",
        "karol bagh", "connaught place", "defence colony", "greater kailash",
        "hauz khas", "karkardooma", "lajpat nagar", "mayur vihar", "narela",
        "pandav nagar", "paschim vihar", "rajouri garden", "saket", "vasant kunj",
        "vishwas nagar", "yamuna vihar", "dwarka sector",
    ],
    "puducherry": [
        "puducherry", "karaikal", "mahe", "yanam", "yanaon", "oussudu",
        "kannigapuram", "thattanchavady", "mannadipet", "mudaliarpet",
    ],
    "andaman and nicobar islands": [
        "port blair", "car nicobar", "havelock island", "swaraj dweep",
        "neil island", "shaheed dweep", "little andaman", "katchal", "nancowry",
        "mayabunder", "diglipur", "rangat", "ross island", "viper island",
    ],
    "dadra and nagar haveli and daman and diu": [
        "daman", "diu", "silvassa", "dadra", "nagar haveli", "dnh",
    ],
    "lakshadweep": [
        "kavaratti", "agatti", "andrott", "bitra", "chethlath", "kadmath",
        "kalpeni", "kiltan", "minicoy", "amini",
    ],
    "ladakh": [
        "leh", "kargil", "drass", "padum", "zanskar", "nubra", "nyoma", "diskit",
    ],
}


def create_default_city_state_map() -> Dict[str, str]:
    """Invert DEFAULT_STATE_CITIES into city -> state."""
    city_to_state = {}
    for state, cities in DEFAULT_STATE_CITIES.items():
        for city in cities:
            city_to_state[city.strip().lower()] = state
    return city_to_state
