# Categorías fijas que reporta el dashboard (en este orden)
ACTIVITY_CATEGORIES = ("alphabet", "numbers", "shapes", "colors", "animals")
