from __future__ import annotations

from typing import Annotated

from pydantic import BeforeValidator

from appstream_catalog.model.types.open_enum import OpenEnum, Unrecognized


class ComponentKind(OpenEnum):
    """
    The `type` attribute of a component.

    https://www.freedesktop.org/software/appstream/docs/chap-Metadata.html#sect-Metadata-GenericComponent
    """

    generic = "generic"
    desktop_application = "desktop-application"
    console_application = "console-application"
    web_application = "web-application"
    service = "service"
    addon = "addon"
    runtime = "runtime"
    font = "font"
    codec = "codec"
    input_method = "inputmethod"
    operating_system = "operating-system"
    firmware = "firmware"
    driver = "driver"
    localization = "localization"
    repository = "repository"
    icon_theme = "icon-theme"

    @classmethod
    def _missing_(cls, value: object) -> ComponentKind | None:
        # Spellings used by older versions of the format.
        match value:
            case "desktop" | "desktop-app":
                return cls.desktop_application
            case "webapp":
                return cls.web_application
        return None


class ImageKind(OpenEnum):
    source = "source"
    thumbnail = "thumbnail"


class ProjectUrlKind(OpenEnum):
    """
    https://www.freedesktop.org/software/appstream/docs/chap-Metadata.html#tag-url
    """

    homepage = "homepage"
    bugtracker = "bugtracker"
    faq = "faq"
    help = "help"
    donation = "donation"
    translate = "translate"
    contact = "contact"
    vcs_browser = "vcs-browser"
    contribute = "contribute"


class ProvideKind(OpenEnum):
    """
    The element names that can appear inside `<provides>`.

    https://www.freedesktop.org/software/appstream/docs/chap-Metadata.html#tag-provides
    """

    mediatype = "mediatype"
    library = "library"
    binary = "binary"
    font = "font"
    modalias = "modalias"
    firmware = "firmware"
    python2 = "python2"
    python3 = "python3"
    dbus = "dbus"
    id = "id"


class LaunchableKind(OpenEnum):
    desktop_id = "desktop-id"
    service = "service"
    cockpit_manifest = "cockpit-manifest"
    url = "url"


class ReleaseKind(OpenEnum):
    stable = "stable"
    development = "development"
    snapshot = "snapshot"


class ReleaseUrgency(OpenEnum):
    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


class Category(OpenEnum):
    """
    Categories from the freedesktop.org menu specification. Tokens are
    matched exactly, so `network` is not the `Network` category.

    https://specifications.freedesktop.org/menu-spec/latest/apa.html
    https://specifications.freedesktop.org/menu-spec/latest/apas02.html
    """

    # Main categories
    AudioVideo = "AudioVideo"
    Audio = "Audio"
    Video = "Video"
    Development = "Development"
    Education = "Education"
    Game = "Game"
    Graphics = "Graphics"
    Network = "Network"
    Office = "Office"
    Science = "Science"
    Settings = "Settings"
    System = "System"
    Utility = "Utility"

    # Additional categories
    Building = "Building"
    Debugger = "Debugger"
    IDE = "IDE"
    GUIDesigner = "GUIDesigner"
    Profiling = "Profiling"
    RevisionControl = "RevisionControl"
    Translation = "Translation"
    Calendar = "Calendar"
    ContactManagement = "ContactManagement"
    Database = "Database"
    Dictionary = "Dictionary"
    Chart = "Chart"
    Email = "Email"
    Finance = "Finance"
    FlowChart = "FlowChart"
    PDA = "PDA"
    ProjectManagement = "ProjectManagement"
    Presentation = "Presentation"
    Spreadsheet = "Spreadsheet"
    WordProcessor = "WordProcessor"
    Graphics2D = "2DGraphics"
    VectorGraphics = "VectorGraphics"
    RasterGraphics = "RasterGraphics"
    Graphics3D = "3DGraphics"
    Scanning = "Scanning"
    OCR = "OCR"
    Photography = "Photography"
    Publishing = "Publishing"
    Viewer = "Viewer"
    TextTools = "TextTools"
    DesktopSettings = "DesktopSettings"
    HardwareSettings = "HardwareSettings"
    Printing = "Printing"
    PackageManager = "PackageManager"
    Dialup = "Dialup"
    InstantMessaging = "InstantMessaging"
    Chat = "Chat"
    IRCClient = "IRCClient"
    Feed = "Feed"
    FileTransfer = "FileTransfer"
    HamRadio = "HamRadio"
    News = "News"
    P2P = "P2P"
    RemoteAccess = "RemoteAccess"
    Telephony = "Telephony"
    TelephonyTools = "TelephonyTools"
    VideoConference = "VideoConference"
    WebBrowser = "WebBrowser"
    WebDevelopment = "WebDevelopment"
    Midi = "Midi"
    Mixer = "Mixer"
    Sequencer = "Sequencer"
    Tuner = "Tuner"
    TV = "TV"
    AudioVideoEditing = "AudioVideoEditing"
    Player = "Player"
    Recorder = "Recorder"
    DiscBurning = "DiscBurning"
    ActionGame = "ActionGame"
    AdventureGame = "AdventureGame"
    ArcadeGame = "ArcadeGame"
    BoardGame = "BoardGame"
    BlocksGame = "BlocksGame"
    CardGame = "CardGame"
    KidsGame = "KidsGame"
    LogicGame = "LogicGame"
    RolePlaying = "RolePlaying"
    Shooter = "Shooter"
    Simulation = "Simulation"
    SportsGame = "SportsGame"
    StrategyGame = "StrategyGame"
    Art = "Art"
    Construction = "Construction"
    Music = "Music"
    Languages = "Languages"
    ArtificialIntelligence = "ArtificialIntelligence"
    Astronomy = "Astronomy"
    Biology = "Biology"
    Chemistry = "Chemistry"
    ComputerScience = "ComputerScience"
    DataVisualization = "DataVisualization"
    Economy = "Economy"
    Electricity = "Electricity"
    Geography = "Geography"
    Geology = "Geology"
    Geoscience = "Geoscience"
    History = "History"
    Humanities = "Humanities"
    ImageProcessing = "ImageProcessing"
    Literature = "Literature"
    Maps = "Maps"
    Math = "Math"
    NumericalAnalysis = "NumericalAnalysis"
    MedicalSoftware = "MedicalSoftware"
    Physics = "Physics"
    Robotics = "Robotics"
    Spirituality = "Spirituality"
    Sports = "Sports"
    ParallelComputing = "ParallelComputing"
    Amusement = "Amusement"
    Archiving = "Archiving"
    Compression = "Compression"
    Electronics = "Electronics"
    Emulator = "Emulator"
    Engineering = "Engineering"
    FileTools = "FileTools"
    FileManager = "FileManager"
    TerminalEmulator = "TerminalEmulator"
    Filesystem = "Filesystem"
    Monitor = "Monitor"
    Security = "Security"
    Accessibility = "Accessibility"
    Calculator = "Calculator"
    Clock = "Clock"
    TextEditor = "TextEditor"
    Documentation = "Documentation"
    Adult = "Adult"
    Core = "Core"
    KDE = "KDE"
    GNOME = "GNOME"
    XFCE = "XFCE"
    DDE = "DDE"
    GTK = "GTK"
    Qt = "Qt"
    Motif = "Motif"
    Java = "Java"
    ConsoleOnly = "ConsoleOnly"


# Pydantic field types for the open vocabularies. Raw tokens are parsed
# with OpenEnum.parse, so unknown tokens become Unrecognized values.
AnyComponentKind = Annotated[
    ComponentKind | Unrecognized, BeforeValidator(ComponentKind.parse)
]
AnyImageKind = Annotated[
    ImageKind | Unrecognized, BeforeValidator(ImageKind.parse)
]
AnyProjectUrlKind = Annotated[
    ProjectUrlKind | Unrecognized, BeforeValidator(ProjectUrlKind.parse)
]
AnyProvideKind = Annotated[
    ProvideKind | Unrecognized, BeforeValidator(ProvideKind.parse)
]
AnyLaunchableKind = Annotated[
    LaunchableKind | Unrecognized, BeforeValidator(LaunchableKind.parse)
]
AnyReleaseKind = Annotated[
    ReleaseKind | Unrecognized, BeforeValidator(ReleaseKind.parse)
]
AnyReleaseUrgency = Annotated[
    ReleaseUrgency | Unrecognized, BeforeValidator(ReleaseUrgency.parse)
]
AnyCategory = Annotated[
    Category | Unrecognized, BeforeValidator(Category.parse)
]
