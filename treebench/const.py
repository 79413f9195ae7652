EXPERIMENTS = (500, 1000, 3000, 6000, 9000, 12000)
OUTPUT_FILE = "output.txt"

# horror movies dataset layout
TITLE_COLUMN = 2
RATING_COLUMN = 10

CSV_HEADER = (
    "dataset",
    "N",
    "ins_bst_sorted_ns",
    "ins_avl_sorted_ns",
    "ins_bst_random_ns",
    "ins_avl_random_ns",
    "sea_bst_sorted_ns",
    "sea_avl_sorted_ns",
    "sea_bst_random_ns",
    "sea_avl_random_ns",
)

NS_PER_SEC = 1_000_000_000
