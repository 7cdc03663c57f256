"""Shell commands exposing numframe functionalities.

Describe
========

``numframe-describe`` loads a CSV file and prints its content
together with the mean, variance and standard deviation of each column::

    numframe-describe --row-names iris.csv

Passing ``--pca N`` also prints the eigenvalues of the principal
component analysis and the data projected on the first ``N`` components::

    numframe-describe --pca 2 --scale iris.csv

"""
