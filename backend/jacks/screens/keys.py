QUIT = {"q"}
MAIN_MENU = {"m"}
DOWN = {"j", "down"}
UP = {"k", "up"}
RIGHT = {"l", "right"}
LEFT = {"h", "left"}
SELECT = {"enter"}
RESIZE = {"resize"}
