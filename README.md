# friendnet

FriendNet is a small interactive social-network database. It keeps each user's
profile (name, age, occupation) as a fixed-width record in a flat file, indexes
users by name in a red-black tree, and keeps a friend list for every user.

## Installing

```
pip install .
```

## Running

Start it with a CSV file of initial users:

```
friendnet users.csv
```

Each line of the CSV holds a name, an age, an occupation and, in double quotes,
a comma-separated list of friends:

```
Alice,34,Engineer,"Bob,Carol"
Bob,29,Teacher,"Alice"
Carol,41,Doctor,"Alice"
```

Lines are loaded in order, and a friendship is only made when both users
already exist, so a friend named before their own line is linked once that
friend's line names the user back (as `Bob` and `Carol` do above). If the CSV
file does not exist, the program starts with an empty network.

On start the file `ProfileData.txt` in the current directory is emptied and
rebuilt from the CSV. Then a menu is shown, read from standard input:

1. Add a new user
2. Create a friendship
3. Get a user's profile
4. Get a user's friends' profiles
5. Get a range of user profiles (names between a start and stop name, inclusive)
6. Print the entire network of friends
7. Print the entire red-black tree
8. Exit

The program also stops when input runs out. Any other choice prints an
"Invalid option" message.

Profiles are printed as `name,age,occupation,`. Option 6 follows each profile
with the user's friends' names, each followed by a comma. Option 7 prints every
node in name order as `name,color,left,right`, where the colour is `0` for red
and `1` for black and a missing child is left out.

When a user is added from the menu, the name is cut to 20 characters, the age
to the first word of the answer cut to 3 characters, and the occupation to 30
characters. Values read from the CSV are not cut, so they must fit these widths
for the fixed-width records to stay aligned.

Adding a name that is already present writes a new record but keeps the user's
first profile.

## Using it from Python

```python
from friendnet.profiles import ProfileStore
from friendnet.network import FriendNet

store = ProfileStore("ProfileData.txt")
store.reset()
net = FriendNet(store)
net.add_user("Alice", "34", "Engineer")
net.add_user("Bob", "29", "Teacher")
net.add_friend("Alice", "Bob")

print(net.user_info("Alice"))        # Alice,34,Engineer,
print(net.friends_info("Alice"))     # ['Bob,29,Teacher,']
print(net.range_info("A", "B"))      # ['Alice,34,Engineer,']
print(net.tree_lines())              # ['Alice,1,Bob', 'Bob,0,']
```

`FriendNet.user_info` returns `None` for an unknown user, and
`FriendNet.record_line` raises `KeyError` instead.

The modules:

- `friendnet.tree` — `RedBlackTree`, with `insert`, `find`, `add_friend`,
  `in_range(low, high)` (nodes whose names fall within the inclusive range),
  `len()`, `in`, and iteration over nodes in name order. Nodes are `RBNode`
  objects with `name`, `index`, `color` (`Color.RED` or `Color.BLACK`),
  `left`, `right`, `parent` and `friends`.
- `friendnet.profiles` — `ProfileStore` (`reset`, `append`, `read`) over a file
  of 54-byte records, `Profile`, `format_record` and `clean_field`.
- `friendnet.network` — `FriendNet`, joining the tree with a `ProfileStore`.
- `friendnet.cli` — `parse_line`, `load_csv`, `run` (the menu over any text
  streams) and `main`, the `friendnet` command.

## Limits

Users and friendships cannot be removed, and profiles cannot be edited once
written. Only the records file is kept on disk: the friendships live in memory
and are lost when the program exits, and the records file is emptied at every
start.

## Tests

```
pip install .[test]
pytest
```