"""Starter code for coding problems that reads stdin in the judge's format.

Inputs arrive space-separated (see ``io_normalizer``); array results are
printed space-separated and missing results as ``null``.
"""

SUPPORTED_LANGUAGES = ("python", "cpp", "c", "java", "javascript")


def _is_array(type_name: str) -> bool:
    return "array" in type_name


def _param_name(input_types: list[str]) -> str:
    first = input_types[0] if input_types else "integer"
    if _is_array(first):
        return "nums"
    if first == "string":
        return "s"
    return "n"


def python_template(function_name: str, input_types: list[str], output_type: str, input_format: str) -> str:
    params: list[str] = []
    reading = ""
    if input_format == "multi_line":
        reading = """lines = []
while True:
    try:
        line = input().strip()
    except EOFError:
        break
    if line:
        lines.append(line)"""
        params.append("lines")
    elif len(input_types) == 1 and _is_array(input_types[0]):
        reading = """try:
    line = input().strip()
    nums = list(map(int, line.split())) if line else []
except EOFError:
    nums = []"""
        params.append("nums")
    elif len(input_types) == 1 and input_types[0] == "string":
        reading = """try:
    s = input().strip()
except EOFError:
    s = \"\""""
        params.append("s")
    else:
        reading = """try:
    n = int(input().strip())
except (EOFError, ValueError):
    n = 0"""
        params.append("n")

    args = ", ".join(params)
    if _is_array(output_type):
        output = f"""result = {function_name}({args})
if isinstance(result, list):
    print(' '.join(map(str, result)))
else:
    print(result if result is not None else 'null')"""
    else:
        output = f"""result = {function_name}({args})
print(result if result is not None else 'null')"""

    return f"""def {function_name}({args}):
    # Write your solution here
    pass

# Input handling
{reading}

# Execute and output
{output}"""


def cpp_template(function_name: str, input_types: list[str], output_type: str, input_format: str) -> str:
    first = input_types[0] if input_types else "integer"
    param = _param_name(input_types)
    if _is_array(first):
        signature_arg = "vector<int>& nums"
        reading = """string line;
    getline(cin, line);
    vector<int> nums;
    if (!line.empty()) {
        istringstream iss(line);
        int num;
        while (iss >> num) {
            nums.push_back(num);
        }
    }"""
    elif first == "string":
        signature_arg = "string s"
        reading = """string s;
    getline(cin, s);"""
    else:
        signature_arg = "int n"
        reading = """int n;
    cin >> n;"""

    if _is_array(output_type):
        return_type, default = "vector<int>", "vector<int>()"
        output = f"""vector<int> result = {function_name}({param});
    for (size_t i = 0; i < result.size(); i++) {{
        if (i > 0) cout << " ";
        cout << result[i];
    }}
    cout << endl;"""
    else:
        return_type = "string" if output_type == "string" else "int"
        default = '""' if output_type == "string" else "0"
        output = f"""auto result = {function_name}({param});
    cout << result << endl;"""

    return f"""#include <iostream>
#include <vector>
#include <string>
#include <sstream>
using namespace std;

{return_type} {function_name}({signature_arg}) {{
    // Write your solution here
    return {default};
}}

int main() {{
    {reading}

    {output}

    return 0;
}}"""


def c_template(function_name: str, input_types: list[str], output_type: str, input_format: str) -> str:
    # Only scalar integer problems get a C scaffold
    return f"""#include <stdio.h>
#include <stdlib.h>
#include <string.h>

int {function_name}(int n) {{
    // Write your solution here
    return 0;
}}

int main() {{
    int n;
    scanf("%d", &n);

    int result = {function_name}(n);
    printf("%d\\n", result);

    return 0;
}}"""


def java_template(function_name: str, input_types: list[str], output_type: str, input_format: str) -> str:
    first = input_types[0] if input_types else "integer"
    array_in = _is_array(first)
    array_out = _is_array(output_type)

    if array_in:
        param_decl = "int[] nums"
        reading = """Scanner sc = new Scanner(System.in);
        String line = sc.hasNextLine() ? sc.nextLine().trim() : "";
        int[] nums;
        if (line.isEmpty()) {
            nums = new int[0];
        } else {
            String[] parts = line.split("\\\\s+");
            nums = new int[parts.length];
            for (int i = 0; i < parts.length; i++) {
                nums[i] = Integer.parseInt(parts[i]);
            }
        }"""
    else:
        param_decl = "int n"
        reading = """Scanner sc = new Scanner(System.in);
        int n = sc.nextInt();"""

    return_type = "int[]" if array_out else "int"
    default = "new int[0]" if array_out else "0"
    arg = "nums" if array_in else "n"
    if array_out:
        output = """StringBuilder sb = new StringBuilder();
        for (int i = 0; i < result.length; i++) {
            if (i > 0) sb.append(" ");
            sb.append(result[i]);
        }
        System.out.println(sb);"""
    else:
        output = "System.out.println(result);"

    return f"""import java.util.*;
import java.io.*;

public class Solution {{
    public {return_type} {function_name}({param_decl}) {{
        // Write your solution here
        return {default};
    }}

    public static void main(String[] args) {{
        {reading}

        Solution solution = new Solution();
        {return_type} result = solution.{function_name}({arg});

        {output}
    }}
}}"""


def javascript_template(function_name: str, input_types: list[str], output_type: str, input_format: str) -> str:
    first = input_types[0] if input_types else "integer"
    if _is_array(first):
        param = "nums"
        parse = "const nums = line.trim() ? line.trim().split(/\\s+/).map(Number) : [];"
        call = f"const result = {function_name}(nums);\n        console.log(Array.isArray(result) ? result.join(' ') : result);"
        default = "[]" if _is_array(output_type) else "0"
    else:
        param = "n"
        parse = "const n = parseInt(line.trim(), 10);"
        call = f"const result = {function_name}(n);\n        console.log(result ?? 'null');"
        default = "0"

    return f"""function {function_name}({param}) {{
    // Write your solution here
    return {default};
}}

const readline = require('readline');
const rl = readline.createInterface({{ input: process.stdin, output: process.stdout }});

rl.on('line', (line) => {{
    try {{
        {parse}
        {call}
    }} catch (error) {{
        console.log('null');
    }}
    rl.close();
}});"""


_BUILDERS = {
    "python": python_template,
    "cpp": cpp_template,
    "c": c_template,
    "java": java_template,
    "javascript": javascript_template,
}


def generate_solution_template(
    language: str,
    function_name: str = "solution",
    input_types: list[str] | None = None,
    output_type: str = "integer",
    input_format: str = "single_line",
) -> str:
    """Starter code for ``language``; unknown languages get the Python scaffold."""
    builder = _BUILDERS.get((language or "").lower(), python_template)
    return builder(function_name, input_types or ["integer"], output_type, input_format)
