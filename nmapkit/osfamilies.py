"""Operating system families as reported in nmap OS detection results."""

from __future__ import annotations

from enum import Enum


class OSFamily(str, Enum):
    """An OS family, usually named after a vendor or a kernel.

    Looking up a family that is not listed yields a value that still compares
    equal to its string, since nmap may report families not enumerated here.
    """

    TwoN = "2N"
    TwoWire = "2Wire"
    ThreeCom = "3Com"
    ThreeM = "3M"
    FourG = "4G"
    ATec = "A-Tec"
    ADIC = "ADIC"
    AKCP = "AKCP"
    AMX = "AMX"
    APC = "APC"
    ARCA = "ARCA"
    ATandT = "AT&T"
    AVM = "AVM"
    AVtech = "AVtech"
    AXIS = "AXIS"
    Aastra = "Aastra"
    AcBel = "AcBel"
    Aceex = "Aceex"
    Acer = "Acer"
    Acme = "Acme"
    Acorp = "Acorp"
    Actiontec = "Actiontec"
    Adaptec = "Adaptec"
    Adtran = "Adtran"
    Adva = "Adva"
    Advanced = "Advanced"
    Aerohive = "Aerohive"
    Aethra = "Aethra"
    Agfa = "Agfa"
    AirLive = "AirLive"
    AirMagnet = "AirMagnet"
    AirSpan = "AirSpan"
    Airaya = "Airaya"
    Airlink101 = "Airlink101"
    Airnet = "Airnet"
    Airvana = "Airvana"
    Alaxala = "Alaxala"
    Alcatel = "Alcatel"
    AlcatelLucent = "Alcatel-Lucent"
    Alice = "Alice"
    AllenBradley = "Allen-Bradley"
    Allied = "Allied"
    Allnet = "Allnet"
    Allworx = "Allworx"
    Alvarion = "Alvarion"
    Amazon = "Amazon"
    Ambit = "Ambit"
    Amiga = "Amiga"
    Anue = "Anue"
    Apple = "Apple"
    Arcor = "Arcor"
    Areca = "Areca"
    Argon = "Argon"
    Argosy = "Argosy"
    Arris = "Arris"
    Aruba = "Aruba"
    Asmax = "Asmax"
    Asus = "Asus"
    Atari = "Atari"
    Atcom = "Atcom"
    AudioCodes = "AudioCodes"
    AudioControl = "AudioControl"
    Avaya = "Avaya"
    Avocent = "Avocent"
    Axcient = "Axcient"
    AzBox = "AzBox"
    BECK = "BECK"
    BSD = "BSD"
    BSDI = "BSDI"
    BT = "BT"
    Barracuda = "Barracuda"
    Barrelfish = "Barrelfish"
    Basler = "Basler"
    Bay = "Bay"
    BeaconMedaes = "BeaconMedaes"
    Beat = "Beat"
    Belkin = "Belkin"
    Bell = "Bell"
    Billion = "Billion"
    BinTec = "BinTec"
    BlackBox = "BlackBox"
    Blackboard = "Blackboard"
    Blue = "Blue"
    BlueArc = "BlueArc"
    Bluebird = "Bluebird"
    Bomara = "Bomara"
    Bosch = "Bosch"
    Bose = "Bose"
    Boundless = "Boundless"
    Bowers = "Bowers"
    British = "British"
    BroadMax = "BroadMax"
    Brocade = "Brocade"
    Brother = "Brother"
    Buffalo = "Buffalo"
    Burny = "Burny"
    Bush = "Bush"
    CNav = "C-Nav"
    CAEN = "CAEN"
    CMI = "CMI"
    Cabletron = "Cabletron"
    Caldera = "Caldera"
    Calix = "Calix"
    Cameo = "Cameo"
    Canon = "Canon"
    Casio = "Casio"
    Cayman = "Cayman"
    Ceedtec = "Ceedtec"
    Check = "Check"
    Chip = "Chip"
    CipherLab = "CipherLab"
    Cisco = "Cisco"
    Citrix = "Citrix"
    CoRAID = "CoRAID"
    Cobalt = "Cobalt"
    Cognex = "Cognex"
    Comau = "Comau"
    Compal = "Compal"
    Compaq = "Compaq"
    Comtrend = "Comtrend"
    Conceptronic = "Conceptronic"
    Control4 = "Control4"
    Coyote = "Coyote"
    Cray = "Cray"
    Crestron = "Crestron"
    CyanogenMod = "CyanogenMod"
    Cyberoam = "Cyberoam"
    Cymphonix = "Cymphonix"
    DLink = "D-Link"
    DEC = "DEC"
    DMP = "DMP"
    DTE = "DTE"
    DVTel = "DVTel"
    DYMO = "DYMO"
    Data = "Data"
    Datalogic = "Datalogic"
    Daysequerra = "Daysequerra"
    Decru = "Decru"
    Dedicated = "Dedicated"
    Dell = "Dell"
    Denon = "Denon"
    Denver = "Denver"
    Develop = "Develop"
    Dick = "Dick"
    Digi = "Digi"
    Digital = "Digital"
    Digitus = "Digitus"
    Digium = "Digium"
    DirecTV = "DirecTV"
    Dish = "Dish"
    Dolby = "Dolby"
    DragonFly = "DragonFly"
    DragonWave = "DragonWave"
    DrayTek = "DrayTek"
    Draytek = "Draytek"
    Drayton = "Drayton"
    Dream = "Dream"
    Drobo = "Drobo"
    EMC = "EMC"
    ESI = "ESI"
    ETH = "ETH"
    EasyPath = "EasyPath"
    Eaton = "Eaton"
    Efficient = "Efficient"
    Eicon = "Eicon"
    Elfiq = "Elfiq"
    Elk = "Elk"
    Elsag = "Elsag"
    Ember = "Ember"
    Emerson = "Emerson"
    EnGenius = "EnGenius"
    Encore = "Encore"
    Endian = "Endian"
    Enerdis = "Enerdis"
    Engetron = "Engetron"
    Enistic = "Enistic"
    Enlogic = "Enlogic"
    Enterasys = "Enterasys"
    Epson = "Epson"
    Ericsson = "Ericsson"
    Espressif = "Espressif"
    Essentia = "Essentia"
    EtherWerX = "EtherWerX"
    Exabyte = "Exabyte"
    Excito = "Excito"
    Express = "Express"
    Exterity = "Exterity"
    Extreme = "Extreme"
    F5 = "F5"
    FORE = "FORE"
    Fatek = "Fatek"
    FireBrick = "FireBrick"
    Force10 = "Force10"
    Fortinet = "Fortinet"
    Foscam = "Foscam"
    Foundry = "Foundry"
    Free = "Free"
    FreeBSD = "FreeBSD"
    FreeNAS = "FreeNAS"
    Freecom = "Freecom"
    Fronius = "Fronius"
    Frontier = "Frontier"
    Fuji = "Fuji"
    Fujian = "Fujian"
    Fujitsu = "Fujitsu"
    Funkwerk = "Funkwerk"
    GNU = "GNU"
    GalaxyMetalGear = "GalaxyMetalGear"
    Gargoyle = "Gargoyle"
    Garmin = "Garmin"
    GbE2c = "GbE2c"
    Geist = "Geist"
    Gemtek = "Gemtek"
    General = "General"
    Generex = "Generex"
    Gennet = "Gennet"
    Genua = "Genua"
    George = "George"
    Geovision = "Geovision"
    GlobespanVirata = "GlobespanVirata"
    GoPro = "GoPro"
    Google = "Google"
    Grace = "Grace"
    Grandstream = "Grandstream"
    Green = "Green"
    H3C = "H3C"
    HID = "HID"
    HP = "HP"
    HW = "HW"
    Haiku = "Haiku"
    Hamlet = "Hamlet"
    Harris = "Harris"
    Hawking = "Hawking"
    Hay = "Hay"
    Head = "Head"
    Henry = "Henry"
    HighFlying = "High-Flying"
    Hikvision = "Hikvision"
    Hioki = "Hioki"
    Hirschmann = "Hirschmann"
    Hitron = "Hitron"
    Hotway = "Hotway"
    Huawei = "Huawei"
    Hybertone = "Hybertone"
    IBM = "IBM"
    IEI = "IEI"
    IGEL = "IGEL"
    IHome = "IHome"
    IOData = "IO-Data"
    IOGear = "IOGear"
    ION = "ION"
    IPAD = "IPAD"
    IPCop = "IPCop"
    IPFire = "IPFire"
    ISS = "ISS"
    ITW = "ITW"
    Icom = "Icom"
    Icy = "Icy"
    Imperva = "Imperva"
    Infoblox = "Infoblox"
    Infomir = "Infomir"
    Infrant = "Infrant"
    Inova = "Inova"
    Instar = "Instar"
    Intel = "Intel"
    Interbell = "Interbell"
    Interflex = "Interflex"
    Intermec = "Intermec"
    Interpeak = "Interpeak"
    Intertex = "Intertex"
    Intracom = "Intracom"
    Inventel = "Inventel"
    Iomega = "Iomega"
    IronPort = "IronPort"
    Isilon = "Isilon"
    Iskratel = "Iskratel"
    JTEKT = "JTEKT"
    Joyent = "Joyent"
    Juniper = "Juniper"
    KA9Q = "KA9Q"
    KCorp = "KCorp"
    KWSoftware = "KW-Software"
    KabaBenzing = "Kaba-Benzing"
    Kaiomy = "Kaiomy"
    Kapsch = "Kapsch"
    Kartina = "Kartina"
    Kemp = "Kemp"
    Keyence = "Keyence"
    Kodak = "Kodak"
    Kongsberg = "Kongsberg"
    Konica = "Konica"
    Koukaam = "Koukaam"
    Kronos = "Kronos"
    Kyocera = "Kyocera"
    LG = "LG"
    LaCie = "LaCie"
    LaCrosse = "LaCrosse"
    LaSAT = "LaSAT"
    Lancom = "Lancom"
    Lanier = "Lanier"
    Lantronix = "Lantronix"
    Larus = "Larus"
    Leica = "Leica"
    Lenel = "Lenel"
    Leolink = "Leolink"
    LevelOne = "LevelOne"
    Lexmark = "Lexmark"
    Liebert = "Liebert"
    LifeSize = "LifeSize"
    Linksys = "Linksys"
    Linux = "Linux"
    LogiLink = "LogiLink"
    Logitech = "Logitech"
    Lorex = "Lorex"
    Lucent = "Lucent"
    Luminary = "Luminary"
    Luxul = "Luxul"
    Lyngsoe = "Lyngsoe"
    MGE = "MGE"
    MOXA = "MOXA"
    MPI = "MPI"
    Macsense = "Macsense"
    Maipu = "Maipu"
    Mapower = "Mapower"
    Marantz = "Marantz"
    McAfee = "McAfee"
    Meinberg = "Meinberg"
    Meru = "Meru"
    Metrix = "Metrix"
    MicroNet = "MicroNet"
    Microsoft = "Microsoft"
    Microware = "Microware"
    MikroTik = "MikroTik"
    Milight = "Milight"
    Minix = "Minix"
    Minolta = "Minolta"
    Mirapoint = "Mirapoint"
    Mitel = "Mitel"
    Mitrastar = "Mitrastar"
    Mitsubishi = "Mitsubishi"
    Modtronix = "Modtronix"
    Motorola = "Motorola"
    MusicianLink = "MusicianLink"
    NCR = "NCR"
    NEC = "NEC"
    NOXON = "NOXON"
    NRG = "NRG"
    NSFOCUS = "NSFOCUS"
    NTI = "NTI"
    NTT = "NTT"
    Nashuatec = "Nashuatec"
    National = "National"
    NeXT = "NeXT"
    Neopost = "Neopost"
    Ness = "Ness"
    Nest = "Nest"
    NetApp = "NetApp"
    NetBSD = "NetBSD"
    NetBurner = "NetBurner"
    NetOptics = "NetOptics"
    Netasq = "Netasq"
    Netcomm = "Netcomm"
    Netgear = "Netgear"
    Netgem = "Netgem"
    Netopia = "Netopia"
    Network = "Network"
    NetworkAlchemy = "NetworkAlchemy"
    NetworksAOK = "NetworksAOK"
    Neuf = "Neuf"
    Newave = "Newave"
    NexStor = "NexStor"
    Nexenta = "Nexenta"
    Nexsan = "Nexsan"
    Nibe = "Nibe"
    Nintendo = "Nintendo"
    NodeMCU = "NodeMCU"
    Nokia = "Nokia"
    Nomadix = "Nomadix"
    Nortel = "Nortel"
    Novatel = "Novatel"
    Novell = "Novell"
    NutOS = "Nut/OS"
    OSRAM = "OSRAM"
    Obihai = "Obihai"
    Ocean = "Ocean"
    Oki = "Oki"
    Olivetti = "Olivetti"
    Olympus = "Olympus"
    Omron = "Omron"
    On = "On"
    OnStor = "OnStor"
    Onboard = "Onboard"
    OneAccess = "OneAccess"
    OpenBSD = "OpenBSD"
    OpenBox = "OpenBox"
    Opto = "Opto"
    Oracle = "Oracle"
    Orange = "Orange"
    Osmosys = "Osmosys"
    Ouya = "Ouya"
    PCBSD = "PC-BSD"
    PCMeasure = "PCMeasure"
    PORTech = "PORTech"
    Packard = "Packard"
    Packet8 = "Packet8"
    PacketFront = "PacketFront"
    Packeteer = "Packeteer"
    Palmmicro = "Palmmicro"
    Palo = "Palo"
    Panasas = "Panasas"
    Panasonic = "Panasonic"
    Papouch = "Papouch"
    Patton = "Patton"
    Peplink = "Peplink"
    Perfectone = "Perfectone"
    Perle = "Perle"
    Phar = "Phar"
    PheeNet = "PheeNet"
    Philips = "Philips"
    Phoenix = "Phoenix"
    Pingtel = "Pingtel"
    Pioneer = "Pioneer"
    Pirelli = "Pirelli"
    Planet = "Planet"
    Polycom = "Polycom"
    Precise = "Precise"
    Printronix = "Printronix"
    Priva = "Priva"
    Promise = "Promise"
    Proxim = "Proxim"
    QEMU = "QEMU"
    QNAP = "QNAP"
    QNX = "QNX"
    QTech = "QTech"
    Qualisys = "Qualisys"
    Quantum = "Quantum"
    Quarterdeck = "Quarterdeck"
    RAD = "RAD"
    RCA = "RCA"
    RF = "RF"
    RFSpace = "RF-Space"
    RGB = "RGB"
    RIM = "RIM"
    RISCOS = "RISCOS"
    RISE = "RISE"
    RSA = "RSA"
    Rabbit = "Rabbit"
    Radware = "Radware"
    Raritan = "Raritan"
    ReactOS = "ReactOS"
    RedM = "Red-M"
    Redback = "Redback"
    Reliable = "Reliable"
    Repotech = "Repotech"
    Revo = "Revo"
    Ricoh = "Ricoh"
    Rigol = "Rigol"
    Rio = "Rio"
    Riverbed = "Riverbed"
    Roberts = "Roberts"
    Rockwell = "Rockwell"
    Roku = "Roku"
    Ruckus = "Ruckus"
    RuggedCom = "RuggedCom"
    Ruijie = "Ruijie"
    SCO = "SCO"
    SEH = "SEH"
    SGI = "SGI"
    SMA = "SMA"
    SMC = "SMC"
    SNR = "SNR"
    Sagem = "Sagem"
    Sagemcom = "Sagemcom"
    Samsung = "Samsung"
    Sandstrom = "Sandstrom"
    Sanyo = "Sanyo"
    Sapling = "Sapling"
    Satel = "Satel"
    Savin = "Savin"
    Schneider = "Schneider"
    Schrack = "Schrack"
    Schweitzer = "Schweitzer"
    Scientific = "Scientific"
    Seagate = "Seagate"
    Secure = "Secure"
    Seiko = "Seiko"
    Senao = "Senao"
    Sensatronics = "Sensatronics"
    Sequent = "Sequent"
    Sharp = "Sharp"
    Shenzhen = "Shenzhen"
    ShoreTel = "ShoreTel"
    Siemens = "Siemens"
    Silicondust = "Silicondust"
    Sinus = "Sinus"
    Sipura = "Sipura"
    Sitecom = "Sitecom"
    Sling = "Sling"
    Slingbox = "Slingbox"
    Smart = "Smart"
    Smartlink = "Smartlink"
    Snom = "Snom"
    Solwise = "Solwise"
    SonicWALL = "SonicWALL"
    Sonos = "Sonos"
    Sonus = "Sonus"
    Sony = "Sony"
    Source = "Source"
    Specialix = "Specialix"
    Sphairon = "Sphairon"
    Star = "Star"
    Starbridge = "Starbridge"
    Stonewater = "Stonewater"
    StorageTek = "StorageTek"
    Stratus = "Stratus"
    Suga = "Suga"
    Sun = "Sun"
    SunPower = "SunPower"
    Supermicro = "Supermicro"
    Syllable = "Syllable"
    Symantec = "Symantec"
    Symbian = "Symbian"
    Symbol = "Symbol"
    Symmetricon = "Symmetricon"
    Synology = "Synology"
    THome = "T-Home"
    TMarc = "T-Marc"
    TPLINK = "TP-LINK"
    TPLink = "TP-Link"
    TRENDnet = "TRENDnet"
    Tadiran = "Tadiran"
    Tahoe = "Tahoe"
    Tandberg = "Tandberg"
    Tandem = "Tandem"
    TechniSat = "TechniSat"
    Tektronix = "Tektronix"
    Telco = "Telco"
    Teldat = "Teldat"
    Telekom = "Telekom"
    Telewell = "Telewell"
    Telex = "Telex"
    Telsey = "Telsey"
    Teltronics = "Teltronics"
    TenAsys = "TenAsys"
    Tenda = "Tenda"
    Teradici = "Teradici"
    Terratec = "Terratec"
    Texas = "Texas"
    Thales = "Thales"
    Thecus = "Thecus"
    Thomson = "Thomson"
    Tiandy = "Tiandy"
    Tibbo = "Tibbo"
    Tigo = "Tigo"
    Tintri = "Tintri"
    TippingPoint = "TippingPoint"
    Tizen = "Tizen"
    Topfield = "Topfield"
    Toptech = "Toptech"
    Toshiba = "Toshiba"
    Trane = "Trane"
    TransAct = "TransAct"
    Tranzeo = "Tranzeo"
    Trapeze = "Trapeze"
    Tripp = "Tripp"
    Tut = "Tut"
    Tyco = "Tyco"
    USRobotics = "USRobotics"
    UTStarcom = "UTStarcom"
    Ubee = "Ubee"
    Ubicom = "Ubicom"
    Ubiquiti = "Ubiquiti"
    Universal = "Universal"
    VBrick = "VBrick"
    VIPA = "VIPA"
    VMware = "VMware"
    VTrak = "VTrak"
    Vantage = "Vantage"
    Vegastream = "Vegastream"
    Viasat = "Viasat"
    Vilar = "Vilar"
    Virdi = "Virdi"
    Visual = "Visual"
    Vocality = "Vocality"
    Vodafone = "Vodafone"
    Vodavi = "Vodavi"
    Vonage = "Vonage"
    WandT = "W&T"
    WAGO = "WAGO"
    WIZnet = "WIZnet"
    Wago = "Wago"
    Walker = "Walker"
    WatchGuard = "WatchGuard"
    WebSense = "WebSense"
    Welltech = "Welltech"
    Westell = "Westell"
    Westermo = "Westermo"
    Western = "Western"
    Wind = "Wind"
    Windows = "Windows"
    World = "World"
    WowWee = "WowWee"
    Wyse = "Wyse"
    XAVi = "XAVi"
    XEUdotCom = "XEU.com"
    XMOS = "XMOS"
    Xerox = "Xerox"
    Xiaomi = "Xiaomi"
    Xirrus = "Xirrus"
    Xylan = "Xylan"
    Xyplex = "Xyplex"
    Yamaha = "Yamaha"
    Yealink = "Yealink"
    ZKTeco = "ZKTeco"
    ZTE = "ZTE"
    Zebra = "Zebra"
    Zelax = "Zelax"
    Zerto = "Zerto"
    Zhone = "Zhone"
    Zipato = "Zipato"
    ZoneAlarm = "ZoneAlarm"
    Zoom = "Zoom"
    ZyXEL = "ZyXEL"
    Zyfer = "Zyfer"
    cab = "cab"
    eCosCentric = "eCosCentric"
    iDirect = "iDirect"
    iPXE = "iPXE"
    iRobot = "iRobot"
    illumos = "illumos"
    ipTIME = "ipTIME"
    lwIP = "lwIP"
    m3 = "m3"
    mbNet = "mbNet"
    nCircle = "nCircle"

    @classmethod
    def _missing_(cls, value: object) -> OSFamily | None:
        if not isinstance(value, str):
            return None
        pseudo = str.__new__(cls, value)
        pseudo._name_ = value
        pseudo._value_ = value
        return pseudo

    @property
    def is_known(self) -> bool:
        """Whether this family is one of the enumerated members."""
        return self._name_ in type(self).__members__

    def __str__(self) -> str:
        return self.value