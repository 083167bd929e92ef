"""JavaScript search routines evaluated in the browser by the Angular locators.

Every script receives the locator arguments in order followed by the element
scoping the search (``null`` searches the whole document) and returns an
array of matching elements.
"""

_NG_HELPERS = r"""
var NG_PREFIXES = ['ng-', 'ng_', 'data-ng-', 'x-ng-', 'ng\\:'];

function scopeOf(using) {
    return using || document;
}

function bindingName(elem) {
    var dataBinding = angular.element(elem).data('$binding');
    if (!dataBinding) {
        return null;
    }
    var name = dataBinding.exp || (dataBinding[0] && dataBinding[0].exp) || dataBinding;
    return '' + name;
}

function bindingsMatching(root, binding) {
    var candidates = Array.prototype.slice.call(
        root.getElementsByClassName('ng-binding'));
    if (root.className && (' ' + root.className + ' ').indexOf(' ng-binding ') !== -1) {
        candidates.unshift(root);
    }
    return candidates.filter(function(elem) {
        var name = bindingName(elem);
        return name !== null && name.indexOf(binding) !== -1;
    });
}

function prefixedSelector(tagName, attr, value) {
    return NG_PREFIXES.map(function(prefix) {
        var condition = value === undefined ? '' : '="' + value + '"';
        return tagName + '[' + prefix + attr + condition + ']';
    }).join(', ');
}

function repeaterRows(repeater, using) {
    var repeatElems = scopeOf(using).querySelectorAll(prefixedSelector('', 'repeat'));
    return Array.prototype.filter.call(repeatElems, function(elem) {
        return NG_PREFIXES.some(function(prefix) {
            var expression = elem.getAttribute(prefix.replace(/\\/g, '') + 'repeat');
            return expression !== null && expression.indexOf(repeater) !== -1;
        });
    });
}

function byModelAttribute(tagName, model, using) {
    return Array.prototype.slice.call(
        scopeOf(using).querySelectorAll(prefixedSelector(tagName, 'model', model)));
}

function buttonText(elem) {
    var tag = elem.tagName.toLowerCase();
    var text = tag === 'input' ? elem.value : elem.textContent;
    return (text || '').trim();
}

function buttons(using) {
    return Array.prototype.slice.call(scopeOf(using).querySelectorAll(
        'button, input[type="button"], input[type="submit"]'));
}
"""

FIND_BINDINGS_SCRIPT = _NG_HELPERS + """
return bindingsMatching(scopeOf(arguments[1]), arguments[0]);
"""

FIND_SELECTS_SCRIPT = _NG_HELPERS + """
return byModelAttribute('select', arguments[0], arguments[1]);
"""

FIND_SELECTED_OPTIONS_SCRIPT = _NG_HELPERS + """
var options = [];
var selects = byModelAttribute('select', arguments[0], arguments[1]);
for (var i = 0; i < selects.length; ++i) {
    var checked = selects[i].querySelectorAll('option:checked');
    for (var j = 0; j < checked.length; ++j) {
        options.push(checked[j]);
    }
}
return options;
"""

FIND_INPUTS_SCRIPT = _NG_HELPERS + """
return byModelAttribute('input', arguments[0], arguments[1]);
"""

FIND_BY_MODEL_SCRIPT = _NG_HELPERS + """
return byModelAttribute('', arguments[0], arguments[1]);
"""

FIND_BY_BUTTON_TEXT_SCRIPT = _NG_HELPERS + """
var searchText = arguments[0];
return buttons(arguments[1]).filter(function(elem) {
    return buttonText(elem) === searchText;
});
"""

FIND_BY_PARTIAL_BUTTON_TEXT_SCRIPT = _NG_HELPERS + """
var searchText = arguments[0];
return buttons(arguments[1]).filter(function(elem) {
    return buttonText(elem).indexOf(searchText) !== -1;
});
"""

FIND_TEXTAREAS_SCRIPT = _NG_HELPERS + """
return byModelAttribute('textarea', arguments[0], arguments[1]);
"""

FIND_ALL_REPEATER_ROWS_SCRIPT = _NG_HELPERS + """
return repeaterRows(arguments[0], arguments[1]);
"""

FIND_REPEATER_ROWS_SCRIPT = _NG_HELPERS + """
var row = repeaterRows(arguments[0], arguments[2])[arguments[1]];
return row ? [row] : [];
"""

FIND_REPEATER_ELEMENT_SCRIPT = _NG_HELPERS + """
var row = repeaterRows(arguments[0], arguments[3])[arguments[1]];
return row ? bindingsMatching(row, arguments[2]) : [];
"""

FIND_REPEATER_COLUMN_SCRIPT = _NG_HELPERS + """
var rows = repeaterRows(arguments[0], arguments[2]);
var matches = [];
for (var i = 0; i < rows.length; ++i) {
    matches = matches.concat(bindingsMatching(rows[i], arguments[1]));
}
return matches;
"""
