import tempfile

from numframe import DataFrame, PCA, StandardScaler, describe, read_csv, write_csv
from numframe.dataframe import ColumnType

df = DataFrame(
    [
        ("Sepal.Length", [5.1, 4.9, 7.0, 6.4, 6.3, 5.8]),
        ("Sepal.Width", [3.5, 3.0, 3.2, 3.2, 3.3, 2.7]),
        ("Petal.Length", [1.4, 1.4, 4.7, 4.5, 6.0, 5.1]),
        ("Count", [8, 8, 7, 5, 9, 3]),
    ],
    row_names=["setosa1", "setosa2", "versicolor1", "versicolor2", "virginica1", "virginica2"],
    types=[ColumnType.DOUBLE, ColumnType.DOUBLE, ColumnType.FLOAT, ColumnType.INT],
)
df.add_row([5.0, 3.4, 1.5, 6], "setosa3")
df.print()

print(df.get(["virginica1", "setosa1"], ["Petal.Length", "Count"]))

with tempfile.NamedTemporaryFile(suffix=".csv") as f:
    write_csv(df, f.name, include_row_names=True)
    df = read_csv(f.name, has_row_names=True)

print(describe(df))
print(StandardScaler().fit_transform(df))

pca = PCA()
print(pca.fit_transform(df, center_and_scale=True, dim=2))
print(pca.eigen_information())
