"""Word and phrase lists used by the style rules."""

IRREGULAR_PARTICIPLES = (
    "awoken", "been", "born", "beat", "become", "begun", "bent", "beset", "bet", "bid",
    "bidden", "bound", "bitten", "bled", "blown", "broken", "bred", "brought", "broadcast",
    "built", "burnt", "burst", "bought", "cast", "caught", "chosen", "clung", "come", "cost",
    "crept", "cut", "dealt", "dug", "dived", "done", "drawn", "dreamt", "driven", "drunk",
    "eaten", "fallen", "fed", "felt", "fought", "found", "fit", "fled", "flung", "flown",
    "forbidden", "forecast", "foregone", "foreseen", "foretold", "forgotten", "forgiven",
    "forsaken", "frozen", "gotten", "given", "gone", "ground", "grown", "hung", "heard",
    "hidden", "hit", "held", "hurt", "kept", "knelt", "knit", "known", "laid", "led",
    "leapt", "learnt", "left", "lent", "let", "lain", "lit", "lost", "made", "meant", "met",
    "misspelt", "mistaken", "mown", "overcome", "overdone", "overtaken", "overthrown",
    "paid", "pled", "proven", "put", "quit", "read", "rid", "ridden", "rung", "risen",
    "run", "sawn", "said", "seen", "sought", "sold", "sent", "set", "sewn", "shaken",
    "shaven", "shorn", "shed", "shone", "shod", "shot", "shown", "shrunk", "shut", "sung",
    "sunk", "sat", "slept", "slain", "slid", "slung", "slit", "smitten", "sown", "spoken",
    "sped", "spent", "spilt", "spun", "spit", "split", "spread", "sprung", "stood",
    "stolen", "stuck", "stung", "stunk", "stridden", "struck", "strung", "striven",
    "sworn", "swept", "swollen", "swum", "swung", "taken", "taught", "torn", "told",
    "thought", "thrived", "thrown", "thrust", "trodden", "understood", "upheld", "upset",
    "woken", "worn", "woven", "wed", "wept", "wound", "won", "withheld", "withstood",
    "wrung", "written",
)

# Words ending in "-ed" that are not past participles
NOT_PARTICIPLES = frozenset({
    "bed", "breed", "feed", "heed", "hundred", "indeed", "need",
    "red", "reed", "seed", "sled", "speed", "steed", "shred", "weed",
    "naked", "wicked", "sacred", "rugged", "ragged", "wretched", "crooked", "jagged",
    "kindred", "beloved", "embed",
})

WEASEL_WORDS = (
    "many", "various", "very", "fairly", "several", "extremely", "exceedingly", "quite",
    "remarkably", "few", "surprisingly", "mostly", "largely", "huge", "tiny",
    "is a number", "are a number", "excellent", "interestingly", "significantly",
    "substantially", "clearly", "vast", "relatively", "completely",
)

ADVERBS = (
    "absolutely", "accidentally", "additionally", "allegedly", "alternatively", "angrily",
    "anxiously", "approximately", "awkwardly", "badly", "barely", "beautifully", "blindly",
    "boldly", "bravely", "brightly", "briskly", "busily", "calmly", "carefully",
    "carelessly", "cautiously", "cheerfully", "closely", "coldly", "completely", "consequently",
    "correctly", "courageously", "cruelly", "currently", "daringly", "definitely",
    "deliberately", "doubtfully", "eagerly", "easily", "elegantly", "enormously", "extremely",
    "enthusiastically", "equally", "especially", "eventually", "exactly", "exclusively",
    "faithfully", "fatally", "fiercely", "finally", "fondly", "foolishly", "fortunately",
    "frankly", "frantically", "generously", "gently", "gladly", "gracefully", "greedily",
    "happily", "hardly", "hastily", "healthily", "heartily", "helpfully", "honestly",
    "hungrily", "hurriedly", "immediately", "impatiently", "inadequately", "ingeniously",
    "innocently", "inquisitively", "irritably", "joyously", "justly", "kindly", "lazily",
    "literally", "loosely", "loudly", "luckily", "madly", "mentally", "mildly", "mortally",
    "mysteriously", "neatly", "nervously", "noisily", "normally", "obediently",
    "occasionally", "openly", "painfully", "particularly", "patiently", "perfectly",
    "politely", "poorly", "powerfully", "presumably", "previously", "promptly",
    "punctually", "quickly", "quietly", "rapidly", "rarely", "really", "recently",
    "recklessly", "regularly", "reluctantly", "repeatedly", "rightfully", "roughly",
    "rudely", "sadly", "safely", "selfishly", "sensibly", "seriously", "sharply", "shortly",
    "shyly", "silently", "simply", "sleepily", "slowly", "smartly", "smoothly", "softly",
    "solemnly", "speedily", "stealthily", "sternly", "stupidly", "successfully",
    "suddenly", "suspiciously", "swiftly", "tenderly", "tensely", "thoughtfully",
    "tightly", "truthfully", "unexpectedly", "unfortunately", "usually", "victoriously",
    "violently", "vivaciously", "warmly", "weakly", "wearily", "wildly", "wisely",
)

WORDY_PHRASES = (
    "a number of", "abundance", "accede to", "accelerate", "accentuate", "accompany",
    "accomplish", "accorded", "accrue", "acquiesce", "acquire", "additional", "adjacent to",
    "adjustment", "admissible", "advantageous", "adversely impact", "advise",
    "aforementioned", "aggregate", "all of", "all things considered", "alleviate",
    "allocate", "along the lines of", "already existing", "ameliorate", "anticipate",
    "apparent", "appreciable", "as a matter of fact", "as a means of",
    "as far as i'm concerned", "as of yet", "as to", "as yet", "ascertain", "assistance",
    "at the present time", "at this time", "attain", "attributable to", "authorize",
    "because of the fact that", "belated", "benefit from", "bestow", "by means of",
    "by virtue of", "by virtue of the fact that", "cease", "close proximity", "commence",
    "comply with", "concerning", "consolidate", "constitutes", "demonstrate", "depart",
    "designate", "discontinue", "due to the fact that", "each and every", "economical",
    "eliminate", "elucidate", "employ", "endeavor", "enumerate", "equitable", "equivalent",
    "evaluate", "evidenced", "expedite", "expend", "expiration", "facilitate",
    "factual evidence", "feasible", "finalize", "first and foremost", "for the purpose of",
    "forfeit", "formulate", "have a tendency to", "honest truth", "if and when", "impacted",
    "implement", "in a manner of speaking", "in a timely manner", "in a very real sense",
    "in accordance with", "in addition", "in all likelihood", "in an effort to",
    "in between", "in excess of", "in lieu of", "in light of the fact that",
    "in many cases", "in my opinion", "in order to", "in regard to", "in some instances",
    "in terms of", "in the near future", "in the process of", "inception",
    "incumbent upon", "indicate", "indication", "initiate", "irregardless",
    "is applicable to", "is authorized to", "is responsible for", "it is essential",
    "it seems that", "magnitude", "maximum", "methodology", "minimize", "minimum",
    "modify", "monitor", "multiple", "necessitate", "nevertheless", "not certain",
    "not many", "not often", "not unless", "not unlike", "notwithstanding",
    "null and void", "numerous", "objective", "obligate", "obtain", "on the contrary",
    "on the other hand", "one particular", "optimum", "overall", "owing to the fact that",
    "participate", "particulars", "pass away", "pertaining to", "point in time", "portion",
    "possess", "preclude", "prior to", "prioritize", "procure", "proficiency",
    "provided that", "purchase", "put simply", "readily apparent", "refer back",
    "regarding", "relocate", "remainder", "remuneration", "requirement", "reside",
    "residence", "retain", "satisfy", "should you wish", "similar to", "solicit",
    "span across", "strategize", "subsequent", "substantial", "successfully complete",
    "sufficient", "terminate", "the month of", "the point i am trying to make",
    "time period", "took advantage of", "transmit", "transpire", "type of",
    "until such time as", "utilization", "utilize", "validate", "various different",
    "what i mean to say is", "whether or not", "with respect to",
    "with the exception of", "witnessed",
)

CLICHES = (
    "a chip off the old block", "a clean slate", "a dark and stormy night", "a far cry",
    "a fine kettle of fish", "a loose cannon", "a penny saved is a penny earned",
    "a tough row to hoe", "a word to the wise", "ace in the hole", "acid test",
    "add insult to injury", "against all odds", "all in a day's work", "all thumbs",
    "all your eggs in one basket", "all's fair in love and war",
    "all's well that ends well", "an axe to grind", "armed to the teeth",
    "as luck would have it", "as old as time", "as the crow flies", "at loose ends",
    "avoid like the plague", "back against the wall", "back to square one",
    "back to the drawing board", "ballpark figure", "baptism by fire",
    "barking up the wrong tree", "beat a dead horse", "beat around the bush",
    "been there, done that", "beggars can't be choosers", "behind the eight ball",
    "bend over backwards", "benefit of the doubt", "best thing since sliced bread",
    "bet your bottom dollar", "better late than never", "better safe than sorry",
    "between a rock and a hard place", "beyond the pale", "bird's eye view",
    "bite the bullet", "bite the dust", "blessing in disguise", "blind as a bat",
    "blood is thicker than water", "blow off steam", "bolt from the blue",
    "bone to pick", "bored to tears", "boils down to", "broken record",
    "bull in a china shop", "burn the midnight oil", "burning question",
    "burning the candle at both ends", "bury the hatchet", "busy as a bee",
    "by hook or by crook", "call a spade a spade", "calm before the storm",
    "can of worms", "can't hold a candle to", "caught red-handed",
    "chomping at the bit", "clear as a bell", "clear as mud", "cold shoulder",
    "come hell or high water", "cool as a cucumber", "count your blessings",
    "crack of dawn", "cross that bridge when you come to it", "cry over spilt milk",
    "crystal clear", "curiosity killed the cat", "cut and dried", "cut to the chase",
    "dead as a doornail", "devil is in the details", "dime a dozen",
    "dog eat dog", "don't rock the boat", "down to earth", "draw the line",
    "easier said than done", "easy as pie", "eleventh hour", "even the playing field",
    "every dog has its day", "everything but the kitchen sink", "face the music",
    "fall by the wayside", "few and far between", "fish out of water", "fit as a fiddle",
    "flash in the pan", "for all intents and purposes", "for what it's worth",
    "forgive and forget", "fresh as a daisy", "full steam ahead", "get the ball rolling",
    "go the extra mile", "go with the flow", "goes without saying", "good as gold",
    "head over heels", "hit the nail on the head", "hold your horses", "icing on the cake",
    "in a nutshell", "in the nick of time", "it goes without saying",
    "jump on the bandwagon", "jump the gun", "keep your fingers crossed",
    "kill two birds with one stone", "knock on wood", "last but not least",
    "leaps and bounds", "let the cat out of the bag", "light at the end of the tunnel",
    "like clockwork", "lion's share", "live and learn", "low-hanging fruit",
    "moment of truth", "more than meets the eye", "needle in a haystack",
    "needless to say", "nip it in the bud", "no pain, no gain", "no stone unturned",
    "not rocket science", "off the top of my head", "on cloud nine",
    "on the same page", "once in a blue moon", "open a can of worms",
    "out of the box", "out of the woods", "over the moon", "par for the course",
    "piece of cake", "play it by ear", "plenty of fish in the sea",
    "pull out all the stops", "put the cart before the horse", "raining cats and dogs",
    "reinvent the wheel", "rings a bell", "sharp as a tack", "shot in the dark",
    "sink or swim", "skating on thin ice", "slept like a log", "spill the beans",
    "start from scratch", "stick in the mud", "take the bull by the horns",
    "the best of both worlds", "the bottom line", "the elephant in the room",
    "think outside the box", "this day and age", "through thick and thin",
    "throw in the towel", "time and time again", "time is of the essence",
    "tip of the iceberg", "to make a long story short", "too good to be true",
    "tried and true", "under the weather", "until the cows come home",
    "uphill battle", "water under the bridge", "when push comes to shove",
    "whole nine yards", "wild goose chase", "win-win situation",
    "worth its weight in gold",
)

TO_BE = (
    "be", "being", "been", "am", "is", "isn't", "are", "aren't", "was", "wasn't", "were",
    "weren't", "i'm", "you're", "we're", "they're", "he's", "she's", "it's", "there's",
    "here's", "where's", "how's", "what's", "who's", "that's", "ain't",
)
