# recoengine

A small recommendation engine that works on a plain-text ratings file. It offers three
ways to recommend items to a user:

- **KNN** (`recoengine.knn`): user-based collaborative filtering with Pearson similarity
  between users
- **MF** (`recoengine.mf`): matrix factorization with a global mean and user and item
  biases, trained by stochastic gradient descent
- **GRAPH** (`recoengine.graph`): personalized PageRank (random walk with restart) on the
  bipartite user–item graph

`recoengine.metrics` has the usual evaluation measures: RMSE, MAE, MAP, NDCG and hit ratio.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Ratings file

Each rating is five whitespace-separated fields:

```
user_id item_id category_id rating timestamp
```

For example:

```
1 42 3 4.5 1262304000
```

`recoengine.data.load_ratings` reads at most 100 000 ratings by default and stops at the
first record that is malformed or incomplete. A file that cannot be opened raises
`OSError`. The commands below read `data/ratings.txt` by default.

## Commands

Generate a random ratings file (users 1–100, items 1–200, categories 1–10, ratings
1.0–5.9, timestamps between 2000 and 2020):

```
recoengine-generate
recoengine-generate --output data/ratings.txt --count 1000 --seed 42
```

Run the interactive menu. It lets you load the data, ask for KNN, MF or graph
recommendations, and print metrics computed on a fixed example:

```
recoengine-menu
recoengine-menu --ratings data/ratings.txt --results resultats.txt
```

Start the recommendation server, one thread per client, on port 8080 by default:

```
recoengine-server
recoengine-server --ratings data/ratings.txt --host 127.0.0.1 --port 8080
```

Query it from another terminal. The client asks for a user id, an algorithm
(`KNN`, `MF` or `GRAPH`) and the number of recommendations:

```
recoengine-client
recoengine-client --host 127.0.0.1 --port 8080
```

Requests go over TCP in the form `user_id=1;algo=KNN;nb=10;`, and the reply is the text
report of the recommendations, cut to 2048 bytes. An unknown algorithm gets an
`Algorithme non reconnu` message. MF recommendations, from the menu or the server, are
also appended to a results file (`resultats.txt` by default).

## Library use

```python
from recoengine.data import load_ratings
from recoengine.knn import recommend_items
from recoengine.mf import MatrixFactorization
from recoengine.graph import RatingGraph
from recoengine.metrics import compute_rmse, compute_map

ratings = load_ratings("data/ratings.txt", 100000)

top_knn = recommend_items(ratings, 1, 5, 10)

model = MatrixFactorization(1000, 1000, 10, None)
model.train(ratings, 20, 0.01, 0.1)
top_mf = model.recommend(ratings, 1, 10)

graph = RatingGraph(ratings, 1000, 1000)
top_graph = graph.recommend(1, 1000, 10)

print(compute_rmse([4, 3, 5, 2], [3.8, 3.2, 5.0, 2.5]))
print(compute_map([10, 20, 30], [20, 40, 30, 50, 10], 5))
```

Every recommender returns a list of `(item_id, score)` pairs, best first.
`recoengine.results.save_recommendations` appends such a list to a results file.

## Ranges and behaviour

- KNN looks at neighbours among users 1–100 and recommends among items 1–200; items
  the user already rated, or with no positive predicted score, are left out.
- MF accepts user and item ids 0–999 by default and recommends among items 1–999;
  ids outside the model raise `ValueError`. Each training starts from fresh random
  factors, so results vary between runs unless a seed is given.
- GRAPH accepts user and item ids 0–999 by default and does not exclude items the
  user has already rated.

## What it does not do

The package does not clean the data before use: rarely rated users or items are kept
as they are. Trained models are not stored; the server and the menu train MF again for
every request. The server has no authentication and answers one request per
connection.