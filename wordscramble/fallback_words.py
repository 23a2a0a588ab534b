"""
Built-in word list used when the remote word list is unavailable.
Words are organized by category and length (3-12 letters).
"""

from typing import Dict, List

from .models import WordEntry

FALLBACK_WORDS: Dict[str, Dict[int, List[str]]] = {
    "general": {
        3: ["cat", "dog", "hat", "sun", "box", "cup", "map", "pen", "key", "oak"],
        4: ["book", "time", "home", "star", "tree", "wind", "bird", "door", "fire", "moon"],
        5: ["house", "world", "dream", "earth", "heart", "light", "ocean", "smile", "storm", "cloud"],
        6: ["garden", "nature", "friend", "bridge", "canvas", "forest", "island", "jungle", "mirror", "shadow"],
        7: ["freedom", "harmony", "journey", "balance", "courage", "gravity", "history", "mystery", "rainbow", "thunder"],
        8: ["universe", "kindness", "strength", "creation", "festival", "mountain", "question", "treasure", "paradise", "heritage"],
        9: ["adventure", "discovery", "knowledge", "happiness", "butterfly", "celebrate", "fortunate", "nostalgia"],
        10: ["friendship", "experience", "creativity", "innovation", "confidence", "generosity", "motivation", "thoughtful"],
        11: ["imagination", "celebration", "inspiration", "opportunity", "performance"],
        12: ["independence", "appreciation", "championship", "neighborhood", "relationship"],
    },
    "tech": {
        3: ["app", "bit", "bug", "cpu", "web"],
        4: ["byte", "code", "data", "disk", "file", "java", "loop", "node", "port", "ruby"],
        5: ["array", "cache", "class", "debug", "logic", "mouse", "query", "stack", "token", "pixel"],
        6: ["binary", "cursor", "server", "python", "socket", "syntax", "vector", "kernel", "router", "thread"],
        7: ["program", "browser", "compile", "network", "pointer", "console", "library", "gateway", "runtime", "storage"],
        8: ["database", "function", "variable", "keyboard", "compiler", "protocol", "terminal", "software", "hardware", "firewall"],
        9: ["algorithm", "framework", "interface", "recursion", "developer", "bandwidth", "processor"],
        10: ["javascript", "repository", "encryption", "middleware", "bootloader", "dependency"],
        11: ["programming", "compilation", "transaction", "abstraction", "inheritance"],
        12: ["optimization", "architecture", "asynchronous", "cryptography", "microservice"],
    },
    "animals": {
        3: ["ant", "bat", "cow", "elk", "fox", "owl", "pig", "rat", "yak", "emu"],
        4: ["bear", "deer", "duck", "frog", "goat", "hawk", "lion", "seal", "swan", "wolf"],
        5: ["camel", "eagle", "horse", "koala", "llama", "otter", "panda", "shark", "tiger", "zebra"],
        6: ["badger", "beaver", "donkey", "falcon", "jaguar", "monkey", "parrot", "rabbit", "turtle", "walrus"],
        7: ["buffalo", "cheetah", "dolphin", "giraffe", "hamster", "leopard", "panther", "peacock", "penguin", "ostrich"],
        8: ["antelope", "elephant", "flamingo", "hedgehog", "kangaroo", "mosquito", "platypus", "squirrel", "tortoise", "reindeer"],
        9: ["alligator", "armadillo", "butterfly", "crocodile", "porcupine", "chameleon", "jellyfish"],
        10: ["chimpanzee", "rhinoceros", "woodpecker", "crustacean", "chinchilla"],
        11: ["caterpillar", "rattlesnake", "hummingbird", "grasshopper"],
        12: ["hippopotamus", "grasshoppers", "caterpillars"],
    },
    "food": {
        3: ["egg", "fig", "ham", "jam", "pie", "tea", "yam", "nut", "oat", "bun"],
        4: ["bean", "cake", "corn", "fish", "lime", "meat", "milk", "pear", "rice", "soup"],
        5: ["apple", "bread", "candy", "curry", "grape", "honey", "lemon", "mango", "pasta", "salad"],
        6: ["banana", "butter", "cherry", "cookie", "garlic", "muffin", "noodle", "orange", "pepper", "tomato"],
        7: ["avocado", "biscuit", "brisket", "cabbage", "chicken", "lettuce", "pancake", "pudding", "sausage", "spinach"],
        8: ["cinnamon", "broccoli", "cucumber", "dumpling", "omelette", "doughnut", "pretzels", "sandwich", "zucchini", "meatball"],
        9: ["asparagus", "blueberry", "chocolate", "croissant", "spaghetti", "raspberry", "artichoke"],
        10: ["cheesecake", "strawberry", "watermelon", "blackberry", "grapefruit"],
        11: ["marshmallow", "pomegranate", "gingerbread", "cauliflower"],
        12: ["butterscotch", "blackberries", "strawberries"],
    },
}


def get_fallback_entries() -> List[WordEntry]:
    """Flatten the built-in dictionary into word entries, one per (word, category)."""
    entries = []
    for category, by_length in FALLBACK_WORDS.items():
        for _length, words in sorted(by_length.items()):
            for word in words:
                entries.append(WordEntry(word=word, category=category))
    return entries
