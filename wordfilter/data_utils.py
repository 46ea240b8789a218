import pandas as pd
from wordfilter.dictionary import Dictionary


def load_answer_dictionary(csv_path: str, column: str = "word") -> Dictionary:
    """
    Load only the official Wordle answers from the CSV.
    Keeps rows where 'day' is not null, and returns a Dictionary.
    """
    df = pd.read_csv(csv_path)
    if "day" not in df.columns:
        raise KeyError(f"column 'day' not found in {csv_path}")
    if column not in df.columns:
        raise KeyError(f"column '{column}' not found in {csv_path}")
    answer_df = df[df["day"].notna()].copy()
    return Dictionary.from_frame(answer_df, column, csv_path)


def load_word_dictionary(csv_path: str, column: str = "word") -> Dictionary:
    """Load every valid five-letter word in the CSV, answers and guesses alike."""
    return Dictionary.from_csv(csv_path, column=column)
