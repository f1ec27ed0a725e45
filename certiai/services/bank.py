"""
Built-in question sets used whenever model generation can't produce a valid quiz.

Every set holds exactly five questions. `verify_bank()` re-checks all of them
against the validator and runs at application startup.
"""
from types import MappingProxyType
from typing import Mapping, Tuple

from ..errors import BankIntegrityError, QuestionValidationError
from ..schemas import QuizQuestion
from ..settings import QUIZ_SIZE
from .validate import validate_question

QuizSet = Tuple[QuizQuestion, ...]

DEFAULT_SKILL = "JavaScript"


def _q(question: str, options: list, answer: int, explanation: str) -> QuizQuestion:
    return QuizQuestion(question=question, options=tuple(options),
                        correct_answer=answer, explanation=explanation)


_BANK = {
    "JavaScript": (
        _q("What is the result of typeof null in JavaScript?",
           ["null", "undefined", "object", "boolean"], 2,
           'typeof null returns "object" due to a legacy bug in JavaScript.'),
        _q("Which method is used to add an element to the end of an array?",
           ["push()", "pop()", "shift()", "unshift()"], 0,
           "push() adds one or more elements to the end of an array."),
        _q('What does the "this" keyword refer to in JavaScript?',
           ["The global object", "The current function", "The context object", "The window object"], 2,
           '"this" refers to the object that is executing the current function.'),
        _q("Which of the following is NOT a JavaScript data type?",
           ["String", "Boolean", "Float", "Symbol"], 2,
           "JavaScript has a single Number type, not separate Integer and Float types."),
        _q("What is the purpose of the Promise object in JavaScript?",
           ["To handle synchronous operations", "To handle asynchronous operations",
            "To create loops", "To define variables"], 1,
           "Promises represent the eventual result of an asynchronous operation."),
    ),
    "React": (
        _q("What is JSX in React?",
           ["A JavaScript library", "A syntax extension for JavaScript", "A CSS framework", "A database"], 1,
           "JSX lets you write HTML-like markup inside JavaScript for React components."),
        _q("Which hook is used to manage state in functional components?",
           ["useEffect", "useState", "useContext", "useReducer"], 1,
           "useState is the primary hook for local component state."),
        _q("What is the purpose of the useEffect hook?",
           ["To manage state", "To handle side effects", "To create components", "To define props"], 1,
           "useEffect runs side effects such as data fetching, subscriptions and DOM updates."),
        _q("How do you pass data from a parent to a child component in React?",
           ["Through state", "Through props", "Through context", "Through refs"], 1,
           "Props carry data from parent components down to their children."),
        _q("What is the virtual DOM in React?",
           ["A real DOM element", "A JavaScript representation of the real DOM",
            "A CSS framework", "A browser database"], 1,
           "React diffs a lightweight in-memory tree against the previous one to minimise DOM updates."),
    ),
    "Python": (
        _q("What is the output of print(type([]))?",
           ["<class 'array'>", "<class 'list'>", "<class 'tuple'>", "<class 'dict'>"], 1,
           "[] is an empty list literal, so type([]) is list."),
        _q("Which keyword is used to define a function in Python?",
           ["function", "def", "func", "define"], 1,
           "Functions are defined with the def keyword."),
        _q("What is the difference between a list and a tuple in Python?",
           ["Lists are immutable, tuples are mutable", "Lists are mutable, tuples are immutable",
            "There is no difference", "Lists are always faster"], 1,
           "Lists can be changed in place; tuples cannot."),
        _q("Which method adds an item to the end of a list in Python?",
           ["add()", "append()", "insert()", "push()"], 1,
           "list.append() adds a single item to the end of the list."),
        _q('What does the "self" parameter represent in Python instance methods?',
           ["The class itself", "The instance of the class", "A static method", "A global variable"], 1,
           "self is the instance the method was called on."),
    ),
    "TypeScript": (
        _q("Which TypeScript type should you prefer over any when the type is unknown?",
           ["never", "unknown", "object", "void"], 1,
           "unknown forces you to narrow the value before using it, unlike any."),
        _q("What does the ? in an interface property like name?: string mean?",
           ["The property is nullable only", "The property is optional",
            "The property is read-only", "The property is private"], 1,
           "A trailing ? marks a property as optional."),
        _q("Which utility type makes every property of T optional?",
           ["Required<T>", "Readonly<T>", "Partial<T>", "Pick<T, K>"], 2,
           "Partial<T> maps every property of T to an optional property."),
        _q("What happens to TypeScript type annotations at runtime?",
           ["They are checked by the JavaScript engine", "They are erased during compilation",
            "They are converted to JSDoc", "They throw on mismatch"], 1,
           "Types exist only at compile time and are erased from the emitted JavaScript."),
        _q("Which syntax declares a union type of string or number?",
           ["string & number", "string | number", "string, number", "[string, number]"], 1,
           "The | operator forms a union; & forms an intersection."),
    ),
    "Node.js": (
        _q("Which module is used to create an HTTP server in Node.js without dependencies?",
           ["fs", "http", "path", "events"], 1,
           "The built-in http module provides createServer()."),
        _q("What does the Node.js event loop allow?",
           ["Multi-threaded JavaScript execution", "Non-blocking I/O on a single thread",
            "Automatic memory paging", "Synchronous file access only"], 1,
           "The event loop dispatches I/O callbacks so one JavaScript thread can serve many requests."),
        _q("Which file lists a Node.js project's dependencies?",
           ["node.config.js", "package.json", "deps.txt", "modules.json"], 1,
           "package.json declares dependencies, scripts and project metadata."),
        _q("How do you read an environment variable named PORT in Node.js?",
           ["process.env.PORT", "env.get('PORT')", "require('PORT')", "os.PORT"], 0,
           "Environment variables are exposed on process.env."),
        _q("Which fs API returns a Promise instead of taking a callback?",
           ["fs.readFileSync", "fs.readFile", "fs.promises.readFile", "fs.createReadStream"], 2,
           "fs.promises exposes Promise-based versions of the file system functions."),
    ),
    "CSS": (
        _q("Which property creates a flex container?",
           ["display: flex", "position: flex", "float: flex", "flex: container"], 0,
           "display: flex turns an element into a flex container."),
        _q("Which selector has the highest specificity?",
           [".card", "#header", "div p", "*"], 1,
           "ID selectors outrank class, type and universal selectors."),
        _q("What does box-sizing: border-box change?",
           ["Margins are included in the width", "Padding and border are included in the width",
            "Borders are removed", "The box becomes inline"], 1,
           "With border-box, width and height include padding and border."),
        _q("Which unit is relative to the root element's font size?",
           ["em", "rem", "px", "vh"], 1,
           "rem is relative to the font size of the html element."),
        _q("Which at-rule applies styles only when a condition on the viewport holds?",
           ["@import", "@media", "@font-face", "@keyframes"], 1,
           "@media queries apply styles conditionally, e.g. by viewport width."),
    ),
    "HTML": (
        _q("Which element is the most appropriate for the main navigation links of a page?",
           ["<div>", "<nav>", "<section>", "<menu>"], 1,
           "<nav> marks a block of major navigation links."),
        _q("Which attribute provides alternative text for an image?",
           ["title", "alt", "src", "caption"], 1,
           "alt text is read by screen readers and shown when the image fails to load."),
        _q("Which input type gives built-in email format validation?",
           ['type="text"', 'type="email"', 'type="mail"', 'type="string"'], 1,
           'type="email" enables browser validation of email addresses.'),
        _q("Where should a <meta charset> declaration be placed?",
           ["At the end of <body>", "Early inside <head>", "Inside <footer>", "Anywhere in the document"], 1,
           "The charset declaration belongs early in <head> so the parser decodes correctly."),
        _q("Which element associates a text caption with a form control?",
           ["<span>", "<label>", "<legend>", "<caption>"], 1,
           "<label for=...> ties the caption to the control and enlarges its click target."),
    ),
    "Vue.js": (
        _q("Which directive renders an element conditionally in Vue?",
           ["v-show", "v-if", "v-for", "v-bind"], 1,
           "v-if adds or removes the element; v-show only toggles its visibility."),
        _q("Which directive creates two-way binding on a form input?",
           ["v-bind", "v-on", "v-model", "v-slot"], 2,
           "v-model keeps the input value and component state in sync."),
        _q("In the Composition API, which function creates a reactive primitive value?",
           ["reactive()", "ref()", "computed()", "watch()"], 1,
           "ref() wraps a value in a reactive reference accessed via .value."),
        _q("What is the shorthand for v-on:click?",
           [":click", "@click", "#click", "v-click"], 1,
           "@ is shorthand for v-on."),
        _q("What is a computed property best used for?",
           ["Triggering side effects", "Caching values derived from reactive state",
            "Defining routes", "Registering components"], 1,
           "Computed properties cache their result until their reactive dependencies change."),
    ),
    "Angular": (
        _q("Which decorator marks a class as an Angular component?",
           ["@Injectable", "@Component", "@NgModule", "@Directive"], 1,
           "@Component declares a class as a component with a template."),
        _q("Which syntax is used for two-way data binding in Angular templates?",
           ["{{value}}", "[value]", "(value)", "[(ngModel)]"], 3,
           "The banana-in-a-box [( )] syntax combines property and event binding."),
        _q("Which Angular feature provides dependency injection for services?",
           ["Pipes", "The injector via @Injectable", "Zones", "Template reference variables"], 1,
           "Services marked @Injectable are provided and resolved by Angular's injector."),
        _q("Which library does Angular's HttpClient return for request results?",
           ["Promises only", "RxJS Observables", "Callbacks", "Generators"], 1,
           "HttpClient methods return RxJS Observables."),
        _q("What is the purpose of an Angular pipe?",
           ["To route between pages", "To transform values for display in templates",
            "To inject services", "To define modules"], 1,
           "Pipes such as date or currency transform values inside templates."),
    ),
    "PHP": (
        _q("Which symbol starts a variable name in PHP?",
           ["@", "$", "#", "&"], 1,
           "PHP variables are prefixed with $."),
        _q("Which function safely escapes output for HTML in PHP?",
           ["strip_tags()", "htmlspecialchars()", "addslashes()", "urlencode()"], 1,
           "htmlspecialchars() converts special characters into HTML entities."),
        _q("Which PDO feature protects against SQL injection?",
           ["PDO::query with string concatenation", "Prepared statements with bound parameters",
            "mysql_real_escape_string", "Persistent connections"], 1,
           "Prepared statements keep data separate from the SQL text."),
        _q("Which superglobal holds data sent in a POST form submission?",
           ["$_GET", "$_POST", "$_SERVER", "$_ENV"], 1,
           "Form fields submitted with method=post appear in $_POST."),
        _q("Which operator compares both value and type in PHP?",
           ["==", "===", "=", "<>"], 1,
           "=== is strict comparison: value and type must both match."),
    ),
}

FALLBACK_BANK: Mapping[str, QuizSet] = MappingProxyType(_BANK)
AVAILABLE_SKILLS: Tuple[str, ...] = tuple(_BANK)

_BY_KEY = {k.casefold(): k for k in _BANK}


def lookup(skill: str, default: str = DEFAULT_SKILL) -> QuizSet:
    """Return the built-in set for `skill`, or the `default` skill's set. Never raises."""
    if skill in FALLBACK_BANK:
        return FALLBACK_BANK[skill]
    key = _BY_KEY.get((skill or "").strip().casefold())
    if key is not None:
        return FALLBACK_BANK[key]
    return FALLBACK_BANK.get(default, FALLBACK_BANK[DEFAULT_SKILL])


def verify_bank(bank: Mapping[str, QuizSet] = FALLBACK_BANK) -> None:
    for skill, questions in bank.items():
        if len(questions) != QUIZ_SIZE:
            raise BankIntegrityError(f"{skill}: expected {QUIZ_SIZE} questions, found {len(questions)}")
        for i, q in enumerate(questions):
            res = validate_question(q.model_dump(mode="json", by_alias=True))
            if isinstance(res, QuestionValidationError):
                raise BankIntegrityError(f"{skill} #{i}: {res}")
