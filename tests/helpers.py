HEADER = (
    "id,original_title,title,original_language,overview,tagline,release_date,"
    "poster_path,popularity,vote_count,vote_average,budget,revenue"
)


def dataset_row(title: str, rating: str, ident: int = 0) -> str:
    """one line in the horror movies layout, title at 2 and rating at 10"""

    cols = [str(ident), title, title, "en", "", "", "2020-01-01", "", "1.0", "10"]
    return ",".join(cols + [rating, "0", "0"])
