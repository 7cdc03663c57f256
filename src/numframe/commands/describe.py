"""Command line interface for summarizing numeric CSV files.

The file is loaded with :func:`numframe.io.read_csv`, then
the data and its :func:`numframe.stats.describe` summary are
printed to the console in a tabular format using the
:mod:`numframe.utils.tabulate` module.
Optionally a :class:`numframe.stats.PCA` is fitted on the data.
"""

import argparse
import logging
import sys

from numframe.dataframe import DataFrame
from numframe.errors import NumframeError
from numframe.io import read_csv
from numframe.stats import PCA, describe


def main(argv: list[str] | None = None) -> None:
    """Parse the command line arguments and summarize the CSV file."""
    parser = argparse.ArgumentParser(description="Summarize a numeric CSV file.")
    parser.add_argument("filename", type=str, help="The CSV file to load.")
    parser.add_argument(
        "--row-names",
        action="store_true",
        help="The first field of each row is the name of the row.",
    )
    parser.add_argument(
        "-d", "--delimiter", default=",", help="The field delimiter, defaults to ','."
    )
    parser.add_argument(
        "--pca",
        type=int,
        metavar="N",
        help="Print the data projected on the first N principal components.",
    )
    parser.add_argument(
        "--scale",
        action="store_true",
        help="Center and scale the columns before the principal component analysis.",
    )
    parser.add_argument(
        "--svd",
        action="store_true",
        help="Use a singular value decomposition for the principal component analysis.",
    )
    parser.add_argument(
        "--max-rows", type=int, default=20, help="How many rows to show at most."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print debug messages."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        df = read_csv(args.filename, has_row_names=args.row_names, delimiter=args.delimiter)
        if df.empty:
            print(f"No data found in {args.filename}")
            sys.exit(1)

        print(df.format(max_rows=args.max_rows))
        print()
        print(describe(df))

        if args.pca is not None:
            pca = PCA()
            projected = pca.fit_transform(
                df, center_and_scale=args.scale, svd=args.svd, dim=args.pca
            )
            eigenvalues = DataFrame(
                {"eigenvalue": pca.eigenvalues},
                row_names=[f"PC{idx}" for idx in range(len(pca.eigenvalues))],
            )
            print()
            print(eigenvalues)
            print()
            print(projected.format(max_rows=args.max_rows))
    except (NumframeError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
