# usage: sentiment lexicon joins (Bing opinion lexicon / VADER) over tidy term tables
import logging

import pandas as pd

from .preprocessing import ensure_nltk_data

logger = logging.getLogger(__name__)

LEXICONS = ("bing", "vader")


def load_lexicon(name: str) -> pd.DataFrame:
    """
    Load a word-level sentiment lexicon shipped with NLTK.

    - "bing":  Hu & Liu opinion lexicon -> DataFrame[word, sentiment] ("positive"/"negative")
    - "vader": VADER valence lexicon     -> DataFrame[word, value]

    The NLTK resource is downloaded on first use.
    """
    if name == "bing":
        ensure_nltk_data("opinion_lexicon", "corpora/opinion_lexicon")
        from nltk.corpus import opinion_lexicon
        rows = [(w, "positive") for w in opinion_lexicon.positive()]
        rows += [(w, "negative") for w in opinion_lexicon.negative()]
        lex = pd.DataFrame(rows, columns=["word", "sentiment"]).drop_duplicates()
    elif name == "vader":
        ensure_nltk_data("vader_lexicon", "sentiment/vader_lexicon.zip")
        from nltk.sentiment import SentimentIntensityAnalyzer
        lexicon = SentimentIntensityAnalyzer().lexicon
        lex = pd.DataFrame(sorted(lexicon.items()), columns=["word", "value"])
    else:
        raise ValueError(f"unknown lexicon {name!r}; choose one of {LEXICONS}")
    logger.info("loaded %s lexicon with %d entries", name, len(lex))
    return lex.reset_index(drop=True)


def join_sentiment(tokens: pd.DataFrame, lexicon: pd.DataFrame, *, term="term", word="word") -> pd.DataFrame:
    """Inner-join a term table onto a lexicon; terms missing from the lexicon drop out."""
    joined = tokens.merge(lexicon, how="inner", left_on=term, right_on=word)
    if word != term:
        joined = joined.drop(columns=[word])
    logger.debug("%d of %d rows matched the lexicon", len(joined), len(tokens))
    return joined


def sentiment_by_document(joined: pd.DataFrame, *, document="document", n="n") -> pd.DataFrame:
    """
    Net sentiment per document.

    Categorical lexicons (a `sentiment` column) give positive and negative
    counts plus sentiment = positive - negative. Valence lexicons (a `value`
    column) give the summed value. Rows are weighted by `n` when that column
    exists, otherwise each row counts once.
    """
    weight = joined[n] if n in joined.columns else pd.Series(1, index=joined.index)

    if "sentiment" in joined.columns:
        if joined.empty:
            return pd.DataFrame(columns=[document, "negative", "positive", "sentiment"])
        table = (joined.assign(_weight=weight)
                 .pivot_table(index=document, columns="sentiment", values="_weight",
                              aggfunc="sum", fill_value=0)
                 .reindex(columns=["negative", "positive"], fill_value=0))
        table.columns.name = None
        table["sentiment"] = table["positive"] - table["negative"]
        return table.reset_index()

    if "value" in joined.columns:
        scored = joined.assign(value=joined["value"] * weight)
        return scored.groupby(document)["value"].sum().reset_index()

    raise ValueError("joined table needs a 'sentiment' or 'value' column from the lexicon")
