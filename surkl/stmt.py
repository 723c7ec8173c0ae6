"""SQL statements used by the storage layers."""

# Scene bookmarks.
BM_TABLE_NAME = "SceneBookmarks"
BM_POSITION_X_COL = "position_x"
BM_POSITION_Y_COL = "position_y"
BM_NAME_COL = "name"

BM_CREATE_TABLE = (
    f"CREATE TABLE IF NOT EXISTS {BM_TABLE_NAME}"
    f" ( {BM_POSITION_X_COL} INTEGER NOT NULL"
    f" , {BM_POSITION_Y_COL} INTEGER NOT NULL"
    f" , {BM_NAME_COL} TEXT NOT NULL"
    f" , UNIQUE({BM_POSITION_X_COL}, {BM_POSITION_Y_COL}) )"
)
BM_SELECT_ALL = f"SELECT * FROM {BM_TABLE_NAME}"
BM_INSERT = (
    f"INSERT OR REPLACE INTO {BM_TABLE_NAME}"
    f" ( {BM_POSITION_X_COL}, {BM_POSITION_Y_COL}, {BM_NAME_COL} ) VALUES ( ?, ?, ? )"
)
BM_DELETE = (
    f"DELETE FROM {BM_TABLE_NAME} WHERE {BM_POSITION_X_COL}=? AND {BM_POSITION_Y_COL}=?"
)

# Scene nodes.
SCENE_NODES_TABLE = "Nodes"
SCENE_NODE_ID = "node_id"
SCENE_NODE_TYPE = "type"
SCENE_NODE_POS_X = "pos_x"
SCENE_NODE_POS_Y = "pos_y"
SCENE_NODE_LEN = "length"

SCENE_NODES_DIR_ATTR_TABLE = "NodesDirAttributes"
SCENE_FIRST_ROW = "first_row"  # row number of the first child node
SCENE_NODE_ROT = "rotation"  # angle of external rotation

SCENE_CREATE_NODES_TABLE = (
    f"CREATE TABLE IF NOT EXISTS {SCENE_NODES_TABLE}"
    f" ( {SCENE_NODE_ID} TEXT PRIMARY KEY"
    f" , {SCENE_NODE_TYPE} INTEGER"
    f" , {SCENE_NODE_POS_X} REAL"
    f" , {SCENE_NODE_POS_Y} REAL"
    f" , {SCENE_NODE_LEN} REAL)"
)
SCENE_CREATE_NODES_DIR_ATTR_TABLE = (
    f"CREATE TABLE IF NOT EXISTS {SCENE_NODES_DIR_ATTR_TABLE}"
    f" ( {SCENE_NODE_ID} TEXT PRIMARY KEY"
    f" , {SCENE_FIRST_ROW} INTEGER"
    f" , {SCENE_NODE_ROT} REAL)"
)
SCENE_SELECT_ALL_NODES = f"SELECT * FROM {SCENE_NODES_TABLE}"
SCENE_SELECT_ALL_NODES_DIR_ATTRS = f"SELECT * FROM {SCENE_NODES_DIR_ATTR_TABLE}"
SCENE_INSERT_NODE = (
    f"INSERT OR REPLACE INTO {SCENE_NODES_TABLE}"
    f" ( {SCENE_NODE_ID}, {SCENE_NODE_TYPE}, {SCENE_NODE_POS_X},"
    f" {SCENE_NODE_POS_Y}, {SCENE_NODE_LEN} ) VALUES ( ?, ?, ?, ?, ? )"
)
SCENE_INSERT_NODE_DIR_ATTR = (
    f"INSERT OR REPLACE INTO {SCENE_NODES_DIR_ATTR_TABLE}"
    f" ( {SCENE_NODE_ID}, {SCENE_FIRST_ROW}, {SCENE_NODE_ROT} ) VALUES ( ?, ?, ? )"
)
SCENE_DELETE_FILE_NODE = f"DELETE FROM {SCENE_NODES_TABLE} WHERE {SCENE_NODE_ID}=?"
SCENE_DELETE_DIR_NODE = (
    f"DELETE FROM {SCENE_NODES_TABLE} WHERE {SCENE_NODE_ID} LIKE ? || '%'"
)
SCENE_DELETE_NODE_DIR_ATTR = (
    f"DELETE FROM {SCENE_NODES_DIR_ATTR_TABLE} WHERE {SCENE_NODE_ID} LIKE ? || '%'"
)

# Theme palettes and settings.
THEME_PALETTES_TABLE = "Palettes"
THEME_COLORS_TABLE = "Colors"
THEME_PALETTE_ID = "palette_id"
THEME_PALETTE_NAME = "name"
THEME_COLOR_POSITION = "position"
THEME_COLOR_VALUE = "value"

THEME_SETTINGS_TABLE = "ThemeSettings"
THEME_ATTRIBUTE_KEY = "attr_key"
THEME_ATTRIBUTE_VALUE = "attr_value"
THEME_ACTIVE_THEME_KEY = "active_theme"

THEME_CREATE_PALETTES_TABLE = (
    f"CREATE TABLE IF NOT EXISTS {THEME_PALETTES_TABLE}"
    f" ( {THEME_PALETTE_ID} TEXT NOT NULL PRIMARY KEY"
    f" , {THEME_PALETTE_NAME} TEXT NOT NULL )"
)
THEME_CREATE_COLORS_TABLE = (
    f"CREATE TABLE IF NOT EXISTS {THEME_COLORS_TABLE}"
    f" ( {THEME_PALETTE_ID} TEXT NOT NULL"
    f" , {THEME_COLOR_POSITION} INTEGER NOT NULL"
    f" , {THEME_COLOR_VALUE} INTEGER NOT NULL )"
)
THEME_CREATE_SETTINGS_TABLE = (
    f"CREATE TABLE IF NOT EXISTS {THEME_SETTINGS_TABLE}"
    f" ( {THEME_ATTRIBUTE_KEY} TEXT PRIMARY KEY"
    f" , {THEME_ATTRIBUTE_VALUE} TEXT NOT NULL )"
)
THEME_INSERT_PALETTE = (
    f"INSERT OR REPLACE INTO {THEME_PALETTES_TABLE}"
    f" ( {THEME_PALETTE_ID}, {THEME_PALETTE_NAME} ) VALUES( ?, ? )"
)
THEME_INSERT_COLOR = (
    f"INSERT OR REPLACE INTO {THEME_COLORS_TABLE}"
    f" ( {THEME_PALETTE_ID}, {THEME_COLOR_POSITION}, {THEME_COLOR_VALUE} ) VALUES( ?, ?, ? )"
)
THEME_INSERT_ATTRIBUTE = (
    f"INSERT OR REPLACE INTO {THEME_SETTINGS_TABLE}"
    f" ( {THEME_ATTRIBUTE_KEY}, {THEME_ATTRIBUTE_VALUE} ) VALUES( ?, ? )"
)
THEME_SELECT_ATTRIBUTE = (
    f"SELECT {THEME_ATTRIBUTE_VALUE} FROM {THEME_SETTINGS_TABLE}"
    f" WHERE {THEME_ATTRIBUTE_KEY}=?"
)
THEME_SELECT_PALETTES = (
    f"SELECT {THEME_PALETTE_ID},{THEME_PALETTE_NAME} FROM {THEME_PALETTES_TABLE}"
)
THEME_SELECT_COLORS = (
    f"SELECT {THEME_PALETTE_ID},{THEME_COLOR_POSITION},{THEME_COLOR_VALUE}"
    f" FROM {THEME_COLORS_TABLE}"
)
THEME_DELETE_PALETTE = f"DELETE FROM {THEME_PALETTES_TABLE} WHERE {THEME_PALETTE_ID}=?"
THEME_DELETE_COLORS = f"DELETE FROM {THEME_COLORS_TABLE} WHERE {THEME_PALETTE_ID}=?"

# General application attributes.
SURKL_TABLE = "Surkl"
SURKL_ATTRIBUTE_KEY = "attr_key"
SURKL_ATTRIBUTE_VALUE = "attr_value"

SURKL_CREATE_TABLE = (
    f"CREATE TABLE IF NOT EXISTS {SURKL_TABLE}"
    f" ( {SURKL_ATTRIBUTE_KEY} TEXT NOT NULL PRIMARY KEY"
    f" , {SURKL_ATTRIBUTE_VALUE} )"
)
SURKL_INSERT_ATTRIBUTE = (
    f"INSERT OR REPLACE INTO {SURKL_TABLE}"
    f" ( {SURKL_ATTRIBUTE_KEY}, {SURKL_ATTRIBUTE_VALUE} ) VALUES( ?, ? )"
)
SURKL_SELECT_ATTRIBUTE = (
    f"SELECT {SURKL_ATTRIBUTE_VALUE},{SURKL_ATTRIBUTE_KEY} FROM {SURKL_TABLE}"
)