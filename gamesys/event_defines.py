"""Input event, key, modifier, scancode and mouse button codes."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class EventType(IntEnum):
    """Kinds of input events."""

    UNKNOWN = -1
    FIRST_EVENT = 0

    # Application events
    QUIT = 256
    APP_TERMINATING = 257
    APP_LOW_MEMORY = 258
    APP_WILL_ENTER_BACKGROUND = 259
    APP_DID_ENTER_BACKGROUND = 260
    APP_WILL_ENTER_FOREGROUND = 261
    APP_DID_ENTER_FOREGROUND = 262
    LOCALE_CHANGED = 263

    # Display events
    DISPLAY_EVENT = 336

    # Window events
    WINDOW_EVENT = 512
    SYS_WM_EVENT = 513

    # Keyboard events
    KEYBOARD_PRESS = 768
    KEYBOARD_RELEASE = 769
    TEXT_EDITING = 770
    TEXT_INPUT = 771
    KEY_MAP_CHANGED = 772
    TEXT_EDITING_EXT = 773

    # Mouse events
    MOUSE_MOTION = 1024
    MOUSE_BUTTON_DOWN = 1025
    MOUSE_BUTTON_UP = 1026
    MOUSE_WHEEL = 1027
    MOUSE_HOLD_MOTION = 1028

    # Touch events
    FINGER_DOWN = 1792
    FINGER_UP = 1793
    FINGER_MOTION = 1794

    # Gesture events
    DOLLAR_GESTURE = 2048
    DOLLAR_RECORD = 2049
    MULTI_GESTURE = 2050

    # Audio hotplug events
    AUDIO_DEVICE_ADDED = 4352
    AUDIO_DEVICE_REMOVED = 4353

    # Sensor events
    SENSOR_UPDATE = 4608

    # User events
    USER_EVENT = 32768


class KeyboardKey(IntEnum):
    """Virtual key codes; printable keys use their character code."""

    UNKNOWN = 0

    RETURN = ord("\r")
    ESCAPE = 0x1B
    BACKSPACE = ord("\b")
    TAB = ord("\t")
    SPACE = ord(" ")
    EXCLAIM = ord("!")
    QUOTE_DBL = ord('"')
    HASH = ord("#")
    DOLLAR = ord("$")
    PERCENT = ord("%")
    AMPERSAND = ord("&")
    QUOTE = ord("'")
    LEFT_PAREN = ord("(")
    RIGHT_PAREN = ord(")")
    ASTERISK = ord("*")
    PLUS = ord("+")
    COMMA = ord(",")
    MINUS = ord("-")
    PERIOD = ord(".")
    SLASH = ord("/")
    KEY_0 = ord("0")
    KEY_1 = ord("1")
    KEY_2 = ord("2")
    KEY_3 = ord("3")
    KEY_4 = ord("4")
    KEY_5 = ord("5")
    KEY_6 = ord("6")
    KEY_7 = ord("7")
    KEY_8 = ord("8")
    KEY_9 = ord("9")
    COLON = ord(":")
    SEMICOLON = ord(";")
    LESS = ord("<")
    EQUALS = ord("=")
    GREATER = ord(">")
    QUESTION = ord("?")
    AT = ord("@")

    LEFT_BRACKET = ord("[")
    BACK_SLASH = ord("\\")
    RIGHT_BRACKET = ord("]")
    CARET = ord("^")
    UNDERSCORE = ord("_")
    BACK_QUOTE = ord("`")
    A = ord("a")
    B = ord("b")
    C = ord("c")
    D = ord("d")
    E = ord("e")
    F = ord("f")
    G = ord("g")
    H = ord("h")
    I = ord("i")  # noqa: E741
    J = ord("j")
    K = ord("k")
    L = ord("l")
    M = ord("m")
    N = ord("n")
    O = ord("o")  # noqa: E741
    P = ord("p")
    Q = ord("q")
    R = ord("r")
    S = ord("s")
    T = ord("t")
    U = ord("u")
    V = ord("v")
    W = ord("w")
    X = ord("x")
    Y = ord("y")
    Z = ord("z")

    DELETE = 127

    F1 = 1073741882
    F2 = 1073741883
    F3 = 1073741884
    F4 = 1073741885
    F5 = 1073741886
    F6 = 1073741887
    F7 = 1073741888
    F8 = 1073741889
    F9 = 1073741890
    F10 = 1073741891
    F11 = 1073741892
    F12 = 1073741893

    PRINT_SCREEN = 1073741894
    SCROLL_LOCK = 1073741895
    PAUSE = 1073741896
    INSERT = 1073741897
    HOME = 1073741898
    PAGE_UP = 1073741899
    END = 1073741901
    PAGE_DOWN = 1073741902

    RIGHT = 1073741903
    LEFT = 1073741904
    DOWN = 1073741905
    UP = 1073741906

    NUMPAD_NUMLOCK = 1073741907
    NUMPAD_DIVIDE = 1073741908
    NUMPAD_MULTIPLY = 1073741909
    NUMPAD_MINUS = 1073741910
    NUMPAD_PLUS = 1073741911
    NUMPAD_ENTER = 1073741912

    NUMPAD_1 = 1073741913
    NUMPAD_2 = 1073741914
    NUMPAD_3 = 1073741915
    NUMPAD_4 = 1073741916
    NUMPAD_5 = 1073741917
    NUMPAD_6 = 1073741918
    NUMPAD_7 = 1073741919
    NUMPAD_8 = 1073741920
    NUMPAD_9 = 1073741921
    NUMPAD_0 = 1073741922
    NUMPAD_PERIOD = 1073741923

    LEFT_CTRL = 1073742048


class Keymod(IntFlag):
    """Keyboard modifier bits."""

    NONE = 0
    LSHIFT = 1
    RSHIFT = 2
    LCTRL = 64
    RCTRL = 128
    LALT = 256
    RALT = 512
    LGUI = 1024
    RGUI = 2048
    NUM = 4096
    CAPS = 8192
    MODE = 16384
    SCROLL = 32768

    CTRL = 64 | 128
    SHIFT = 1 | 2
    ALT = 256 | 512
    GUI = 1024 | 2048

    RESERVED = 32768


class Scancode(IntEnum):
    """Physical key positions."""

    UNKNOWN = 0

    A = 4
    B = 5
    C = 6
    D = 7
    E = 8
    F = 9
    G = 10
    H = 11
    I = 12  # noqa: E741
    J = 13
    K = 14
    L = 15
    M = 16
    N = 17
    O = 18  # noqa: E741
    P = 19
    Q = 20
    R = 21
    S = 22
    T = 23
    U = 24
    V = 25
    W = 26
    X = 27
    Y = 28
    Z = 29

    DIGIT_1 = 30
    DIGIT_2 = 31
    DIGIT_3 = 32
    DIGIT_4 = 33
    DIGIT_5 = 34
    DIGIT_6 = 35
    DIGIT_7 = 36
    DIGIT_8 = 37
    DIGIT_9 = 38
    DIGIT_0 = 39

    RETURN = 40
    ESCAPE = 41
    BACKSPACE = 42
    TAB = 43
    SPACE = 44

    MINUS = 45
    EQUALS = 46
    LEFTBRACKET = 47
    RIGHTBRACKET = 48
    BACKSLASH = 49
    NONUSHASH = 50
    SEMICOLON = 51
    APOSTROPHE = 52
    GRAVE = 53
    COMMA = 54
    PERIOD = 55
    SLASH = 56

    CAPSLOCK = 57

    F1 = 58
    F2 = 59
    F3 = 60
    F4 = 61
    F5 = 62
    F6 = 63
    F7 = 64
    F8 = 65
    F9 = 66
    F10 = 67
    F11 = 68
    F12 = 69

    PRINTSCREEN = 70
    SCROLLLOCK = 71
    PAUSE = 72
    INSERT = 73
    HOME = 74
    PAGEUP = 75
    DELETE = 76
    END = 77
    PAGEDOWN = 78

    RIGHT = 79
    LEFT = 80
    DOWN = 81
    UP = 82

    NUMLOCKCLEAR = 83
    KP_DIVIDE = 84
    KP_MULTIPLY = 85
    KP_MINUS = 86
    KP_PLUS = 87
    KP_ENTER = 88
    KP_1 = 89
    KP_2 = 90
    KP_3 = 91
    KP_4 = 92
    KP_5 = 93
    KP_6 = 94
    KP_7 = 95
    KP_8 = 96
    KP_9 = 97
    KP_0 = 98
    KP_PERIOD = 99

    NONUSBACKSLASH = 100
    KP_EQUALS = 103
    KP_COMMA = 133
    KP_EQUALSAS400 = 134

    KP_00 = 176
    KP_000 = 177
    THOUSANDSSEPARATOR = 178
    DECIMALSEPARATOR = 179
    CURRENCYUNIT = 180
    CURRENCYSUBUNIT = 181
    KP_LEFTPAREN = 182
    KP_RIGHTPAREN = 183
    KP_LEFTBRACE = 184
    KP_RIGHTBRACE = 185
    KP_TAB = 186
    KP_BACKSPACE = 187
    KP_A = 188
    KP_B = 189
    KP_C = 190
    KP_D = 191
    KP_E = 192
    KP_F = 193
    KP_XOR = 194
    KP_POWER = 195
    KP_PERCENT = 196
    KP_LESS = 197
    KP_GREATER = 198
    KP_AMPERSAND = 199
    KP_DBLAMPERSAND = 200
    KP_VERTICALBAR = 201
    KP_DBLVERTICALBAR = 202
    KP_COLON = 203
    KP_HASH = 204
    KP_SPACE = 205
    KP_AT = 206
    KP_EXCLAM = 207
    KP_MEMSTORE = 208
    KP_MEMRECALL = 209
    KP_MEMCLEAR = 210
    KP_MEMADD = 211
    KP_MEMSUBTRACT = 212
    KP_MEMMULTIPLY = 213
    KP_MEMDIVIDE = 214
    KP_PLUSMINUS = 215
    KP_CLEAR = 216
    KP_CLEARENTRY = 217
    KP_BINARY = 218
    KP_OCTAL = 219
    KP_DECIMAL = 220
    KP_HEXADECIMAL = 221

    LCTRL = 224
    LSHIFT = 225
    LALT = 226
    LGUI = 227
    RCTRL = 228
    RSHIFT = 229
    RALT = 230
    RGUI = 231

    MODE = 257

    AUDIONEXT = 258
    AUDIOPREV = 259
    AUDIOSTOP = 260
    AUDIOPLAY = 261
    AUDIOMUTE = 262
    MEDIASELECT = 263
    WWW = 264
    MAIL = 265
    CALCULATOR = 266
    COMPUTER = 267
    AC_SEARCH = 268
    AC_HOME = 269
    AC_BACK = 270
    AC_FORWARD = 271
    AC_STOP = 272
    AC_REFRESH = 273
    AC_BOOKMARKS = 274

    BRIGHTNESSDOWN = 275
    BRIGHTNESSUP = 276
    DISPLAYSWITCH = 277
    KBDILLUMTOGGLE = 278
    KBDILLUMDOWN = 279
    KBDILLUMUP = 280
    EJECT = 281
    SLEEP = 282

    APP1 = 283
    APP2 = 284

    AUDIOREWIND = 285
    AUDIOFASTFORWARD = 286

    NUM_SCANCODES = 512


class MouseKey(IntEnum):
    """Mouse buttons."""

    UNKNOWN = 0
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


class MouseWheel(IntEnum):
    """Mouse wheel thresholds."""

    UP_DOWN_THRESHOLD = 0